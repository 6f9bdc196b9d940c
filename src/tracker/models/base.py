from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current UTC time as naive datetime.

    Columns are TIMESTAMP WITHOUT TIME ZONE; all values are UTC by convention.
    """
    return datetime.now(UTC).replace(tzinfo=None)


def to_naive_utc(value: datetime | None) -> datetime | None:
    """Convert an aware datetime to naive UTC. Naive values are taken as UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)

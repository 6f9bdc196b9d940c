"""Project model."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.tracker.models.base import utc_now
from src.tracker.models.enums import ProjectStatus


class Project(SQLModel, table=True):
    """Project owning a set of work items.

    `key` prefixes every work item external ID and never changes after creation.
    `item_sequence` holds the last number handed out for this project's work items.
    """

    __tablename__ = "projects"

    id: int | None = Field(default=None, primary_key=True)
    key: str = Field(max_length=10, unique=True, index=True)
    name: str = Field(max_length=100, index=True)
    description: str | None = Field(default=None)
    status: str = Field(default=ProjectStatus.ACTIVE.value, max_length=20, index=True)
    created_by: int | None = Field(default=None, foreign_key="users.id", ondelete="SET NULL")
    team_id: int | None = Field(
        default=None, foreign_key="teams.id", ondelete="SET NULL", index=True
    )
    start_date: datetime | None = Field(default=None)
    target_date: datetime | None = Field(default=None)
    item_sequence: int = Field(default=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

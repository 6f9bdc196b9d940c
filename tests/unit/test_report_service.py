"""Tests for project statistics."""

from datetime import datetime, timedelta

import pytest

from src.tracker.core.exceptions import NotFoundError
from src.tracker.services import ReportService
from src.tracker.services.report_service import average_resolve_days, days_until
from src.tracker.storage import MemoryStorage
from tests.factories import UserFactory, WorkItemFactory
from tests.helpers import create_project

START = datetime(2026, 1, 1)


def resolved(status: str, start: datetime | None, days: int | None):
    completed_at = START + timedelta(days=days) if days is not None else None
    return WorkItemFactory.build(status=status, start_date=start, completed_at=completed_at)


@pytest.mark.unit
def test_average_resolve_days_ignores_unfinished_and_negative():
    items = [
        resolved("DONE", START, 2),
        resolved("DONE", START, 4),
        # Completed before it started
        resolved("DONE", START, -9),
        resolved("IN_PROGRESS", START, None),
        resolved("DONE", None, 0),
    ]
    assert average_resolve_days(items) == 3


@pytest.mark.unit
def test_average_resolve_days_empty():
    assert average_resolve_days([]) == 0


@pytest.mark.unit
def test_days_until():
    assert days_until(None) is None
    assert days_until(START + timedelta(days=10), now=START) == 10
    assert days_until(START - timedelta(days=3), now=START) == -3


async def test_project_statistics(storage: MemoryStorage):
    project = await create_project(storage, target_date=datetime(2100, 1, 1))
    alice = await storage.create_user(UserFactory.build(full_name="Alice"))
    rows = [
        ("EPIC", "DONE", "HIGH", alice.id),
        ("STORY", "IN_PROGRESS", "MEDIUM", alice.id),
        ("STORY", "TODO", "MEDIUM", None),
        ("BUG", "DONE", "CRITICAL", None),
    ]
    for n, (item_type, status, priority, assignee_id) in enumerate(rows, start=1):
        await storage.create_work_item(
            WorkItemFactory.build(
                project_id=project.id,
                external_id=f"{project.key}-{n:03d}",
                type=item_type,
                status=status,
                priority=priority,
                assignee_id=assignee_id,
            )
        )

    stats = await ReportService(storage).project_statistics(project.id)

    assert stats.total_items == 4
    assert stats.completed_items == 2
    assert stats.completion_percentage == 50
    assert stats.status_counts == {"DONE": 2, "IN_PROGRESS": 1, "TODO": 1}
    assert stats.type_counts == {"EPIC": 1, "STORY": 2, "BUG": 1}
    assert stats.priority_counts == {"HIGH": 1, "MEDIUM": 2, "CRITICAL": 1}
    assert len(stats.assignee_stats) == 1
    alice_stats = stats.assignee_stats[0]
    assert (alice_stats.name, alice_stats.total_assigned, alice_stats.completion_rate) == (
        "Alice",
        2,
        50,
    )
    assert alice_stats.in_progress == 1
    assert stats.timeline.days_remaining > 0


async def test_empty_project(storage: MemoryStorage):
    project = await create_project(storage)

    stats = await ReportService(storage).project_statistics(project.id)

    assert stats.total_items == 0
    assert stats.completion_percentage == 0
    assert stats.timeline.days_remaining is None


async def test_unknown_project(storage: MemoryStorage):
    with pytest.raises(NotFoundError):
        await ReportService(storage).project_statistics(404)

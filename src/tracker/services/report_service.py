"""Project statistics."""

from datetime import datetime

from src.tracker.core.exceptions import NotFoundError
from src.tracker.models import WorkItem, WorkItemStatus
from src.tracker.models.base import utc_now
from src.tracker.schemas.report import AssigneeStats, ProjectStatistics, ProjectTimeline
from src.tracker.storage import Storage, WorkItemFilters

SECONDS_PER_DAY = 60 * 60 * 24


def _percentage(part: int, whole: int) -> int:
    return round(part / whole * 100) if whole else 0


def average_resolve_days(items: list[WorkItem]) -> int:
    """Mean days from start_date to completed_at over resolved items.

    Only DONE items with both timestamps and a positive duration count.
    """
    durations = [
        (item.completed_at - item.start_date).total_seconds()
        for item in items
        if item.status == WorkItemStatus.DONE.value
        and item.start_date is not None
        and item.completed_at is not None
        and item.completed_at > item.start_date
    ]
    if not durations:
        return 0
    return round(sum(durations) / SECONDS_PER_DAY / len(durations))


def days_until(target: datetime | None, now: datetime | None = None) -> int | None:
    if target is None:
        return None
    now = now or utc_now()
    return round((target - now).total_seconds() / SECONDS_PER_DAY)


class ReportService:
    def __init__(self, storage: Storage):
        self.storage = storage

    async def project_statistics(self, project_id: int) -> ProjectStatistics:
        project = await self.storage.get_project(project_id)
        if project is None:
            raise NotFoundError("Project not found")

        items = await self.storage.list_work_items(WorkItemFilters(project_id=project_id))
        completed = [item for item in items if item.status == WorkItemStatus.DONE.value]

        return ProjectStatistics(
            total_items=len(items),
            completed_items=len(completed),
            completion_percentage=_percentage(len(completed), len(items)),
            avg_time_to_resolve=average_resolve_days(items),
            status_counts=await self.storage.count_work_items_by(project_id, "status"),
            type_counts=await self.storage.count_work_items_by(project_id, "type"),
            priority_counts=await self.storage.count_work_items_by(project_id, "priority"),
            assignee_stats=await self._assignee_stats(items),
            timeline=ProjectTimeline(
                start_date=project.start_date,
                target_date=project.target_date,
                days_remaining=days_until(project.target_date),
            ),
        )

    async def _assignee_stats(self, items: list[WorkItem]) -> list[AssigneeStats]:
        by_assignee: dict[int, list[WorkItem]] = {}
        for item in items:
            if item.assignee_id is not None:
                by_assignee.setdefault(item.assignee_id, []).append(item)

        stats = []
        for assignee_id, assigned in by_assignee.items():
            user = await self.storage.get_user(assignee_id)
            if user is None:
                continue
            statuses = [item.status for item in assigned]
            completed = statuses.count(WorkItemStatus.DONE.value)
            stats.append(
                AssigneeStats(
                    id=assignee_id,
                    name=user.full_name,
                    total_assigned=len(assigned),
                    completed=completed,
                    in_progress=statuses.count(WorkItemStatus.IN_PROGRESS.value),
                    todo=statuses.count(WorkItemStatus.TODO.value),
                    completion_rate=_percentage(completed, len(assigned)),
                )
            )
        return stats

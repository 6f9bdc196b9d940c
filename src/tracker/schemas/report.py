"""Project statistics response."""

from datetime import datetime

from pydantic import BaseModel


class AssigneeStats(BaseModel):
    id: int
    name: str
    total_assigned: int
    completed: int
    in_progress: int
    todo: int
    completion_rate: int


class ProjectTimeline(BaseModel):
    start_date: datetime | None
    target_date: datetime | None
    days_remaining: int | None


class ProjectStatistics(BaseModel):
    """Aggregates over one project's work items.

    `avg_time_to_resolve` is in whole days, over DONE items that have both a
    start date and a completion time later than it.
    """

    total_items: int
    completed_items: int
    completion_percentage: int
    avg_time_to_resolve: int
    status_counts: dict[str, int]
    type_counts: dict[str, int]
    priority_counts: dict[str, int]
    assignee_stats: list[AssigneeStats]
    timeline: ProjectTimeline

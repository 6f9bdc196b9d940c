"""Work item model - epics, features, stories, tasks and bugs in one table."""

from datetime import datetime

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from src.tracker.models.base import utc_now
from src.tracker.models.enums import WorkItemPriority, WorkItemStatus


class WorkItem(SQLModel, table=True):
    """A trackable unit of work.

    `parent_id` points at another work item of the same project; which types may be
    nested under which is decided by the hierarchy table, not by the schema.
    """

    __tablename__ = "work_items"
    __table_args__ = (Index("ix_work_items_type_status", "type", "status"),)

    id: int | None = Field(default=None, primary_key=True)
    external_id: str = Field(max_length=20, unique=True, index=True)
    title: str = Field(max_length=200)
    description: str | None = Field(default=None)
    type: str = Field(max_length=20)
    status: str = Field(default=WorkItemStatus.TODO.value, max_length=20)
    priority: str = Field(default=WorkItemPriority.MEDIUM.value, max_length=20)
    project_id: int = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
    parent_id: int | None = Field(default=None, foreign_key="work_items.id", index=True)
    assignee_id: int | None = Field(
        default=None, foreign_key="users.id", ondelete="SET NULL", index=True
    )
    reporter_id: int | None = Field(
        default=None, foreign_key="users.id", ondelete="SET NULL", index=True
    )
    estimate: float | None = Field(default=None)
    start_date: datetime | None = Field(default=None)
    end_date: datetime | None = Field(default=None)
    completed_at: datetime | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

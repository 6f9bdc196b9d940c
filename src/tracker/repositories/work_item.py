"""Repository for WorkItem entity."""

from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete, func
from sqlmodel import select

from src.tracker.models import WorkItem
from src.tracker.repositories.base import BaseRepository


@dataclass(frozen=True)
class WorkItemFilters:
    """Optional filters for work item listings. None means "any"."""

    project_id: int | None = None
    type: str | None = None
    status: str | None = None
    priority: str | None = None
    assignee_id: int | None = None
    unassigned: bool = False
    parent_id: int | None = None

    def matches(self, item: WorkItem) -> bool:
        """Evaluate the filters against an item in Python."""
        if self.project_id is not None and item.project_id != self.project_id:
            return False
        if self.type is not None and item.type != self.type:
            return False
        if self.status is not None and item.status != self.status:
            return False
        if self.priority is not None and item.priority != self.priority:
            return False
        if self.assignee_id is not None and item.assignee_id != self.assignee_id:
            return False
        if self.unassigned and item.assignee_id is not None:
            return False
        if self.parent_id is not None and item.parent_id != self.parent_id:
            return False
        return True


COUNTABLE_FIELDS = frozenset({"status", "type", "priority"})


class WorkItemRepository(BaseRepository[WorkItem]):
    model = WorkItem

    async def get_by_external_id(self, external_id: str) -> WorkItem | None:
        result = await self.session.execute(
            select(WorkItem).where(WorkItem.external_id == external_id)
        )
        return result.scalar_one_or_none()

    async def list_filtered(self, filters: WorkItemFilters) -> list[WorkItem]:
        query = select(WorkItem)
        if filters.project_id is not None:
            query = query.where(WorkItem.project_id == filters.project_id)
        if filters.type is not None:
            query = query.where(WorkItem.type == filters.type)
        if filters.status is not None:
            query = query.where(WorkItem.status == filters.status)
        if filters.priority is not None:
            query = query.where(WorkItem.priority == filters.priority)
        if filters.assignee_id is not None:
            query = query.where(WorkItem.assignee_id == filters.assignee_id)
        if filters.unassigned:
            query = query.where(WorkItem.assignee_id == None)  # noqa: E711
        if filters.parent_id is not None:
            query = query.where(WorkItem.parent_id == filters.parent_id)
        result = await self.session.execute(query.order_by(WorkItem.id))
        return list(result.scalars().all())

    async def list_children(self, parent_id: int) -> list[WorkItem]:
        return await self.list_filtered(WorkItemFilters(parent_id=parent_id))

    async def has_children(self, parent_id: int) -> bool:
        result = await self.session.execute(
            select(WorkItem.id).where(WorkItem.parent_id == parent_id).limit(1)
        )
        return result.first() is not None

    async def count_by(self, project_id: int, field: str) -> dict[str, int]:
        """Count a project's items grouped by status, type or priority."""
        if field not in COUNTABLE_FIELDS:
            raise ValueError(f"Cannot group work items by {field!r}")
        column: Any = getattr(WorkItem, field)
        result = await self.session.execute(
            select(column, func.count())
            .where(WorkItem.project_id == project_id)
            .group_by(column)
        )
        return {value: count for value, count in result.all()}

    async def delete_by_project(self, project_id: int) -> None:
        """Delete a project's items (no commit); activity rows cascade in the database."""
        await self.session.execute(
            delete(WorkItem)
            .where(WorkItem.project_id == project_id)  # type: ignore[arg-type]
            .execution_options(synchronize_session=False)
        )

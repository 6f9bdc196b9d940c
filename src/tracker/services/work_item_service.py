"""Work item lifecycle: creation, updates, status changes and deletion.

Authorization and hierarchy checks run before anything is written, so a
rejected request never leaves a partial change behind.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from src.tracker.core.authorization import Operation, Principal, ResourceType, authorize
from src.tracker.core.exceptions import (
    ConflictError,
    HasChildrenError,
    InvalidRelationshipError,
    NotFoundError,
    ValidationFailedError,
)
from src.tracker.core.hierarchy import relationship_error_message, validate_parent_child
from src.tracker.core.logging import get_logger
from src.tracker.models import WorkItem, WorkItemHistory, WorkItemStatus
from src.tracker.models.base import utc_now
from src.tracker.schemas.work_item import WorkItemCreate, WorkItemUpdate
from src.tracker.services.external_id import MAX_ALLOCATION_ATTEMPTS, ExternalIdGenerator
from src.tracker.storage import Storage, WorkItemFilters, conflict_for

logger = get_logger(__name__)


def _history_value(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _is_external_id_conflict(exc: ConflictError) -> bool:
    return any(error.get("path") == "external_id" for error in exc.errors or [])


class WorkItemService:
    def __init__(self, storage: Storage):
        self.storage = storage
        self.id_generator = ExternalIdGenerator(storage)

    async def get(self, item_id: int) -> WorkItem:
        item = await self.storage.get_work_item(item_id)
        if item is None:
            raise NotFoundError("Work item not found")
        return item

    async def list_items(self, filters: WorkItemFilters) -> list[WorkItem]:
        return await self.storage.list_work_items(filters)

    async def list_children(self, item_id: int) -> list[WorkItem]:
        await self.get(item_id)
        return await self.storage.list_children(item_id)

    # Validation helpers

    async def _get_parent(self, parent_id: int) -> WorkItem:
        parent = await self.storage.get_work_item(parent_id)
        if parent is None:
            raise NotFoundError("Parent work item not found")
        return parent

    @staticmethod
    def _check_pair(parent: WorkItem, child_type: str, project_id: int) -> None:
        if parent.project_id != project_id:
            raise InvalidRelationshipError("Parent work item must belong to the same project")
        if not validate_parent_child(parent.type, child_type):
            raise InvalidRelationshipError(relationship_error_message(parent.type, child_type))

    async def _check_not_descendant(self, item: WorkItem, parent: WorkItem) -> None:
        """Reject a parent that is the item itself or lies beneath it."""
        seen: set[int] = set()
        current: WorkItem | None = parent
        while current is not None and current.id not in seen:
            if current.id == item.id:
                raise InvalidRelationshipError(
                    "A work item cannot be moved under itself or one of its descendants"
                )
            seen.add(current.id)  # type: ignore[arg-type]
            if current.parent_id is None:
                break
            current = await self.storage.get_work_item(current.parent_id)

    async def _check_users(self, values: dict[str, Any]) -> None:
        for field in ("assignee_id", "reporter_id"):
            user_id = values.get(field)
            if user_id is not None and await self.storage.get_user(user_id) is None:
                raise ValidationFailedError.for_field(field, "User not found")

    # Commands

    async def create(self, principal: Principal, data: WorkItemCreate) -> WorkItem:
        authorize(principal, Operation.CREATE, ResourceType.for_work_item(data.type))

        if await self.storage.get_project(data.project_id) is None:
            raise NotFoundError("Project not found")
        if data.parent_id is not None:
            parent = await self._get_parent(data.parent_id)
            self._check_pair(parent, data.type.value, data.project_id)

        values = data.model_dump(exclude={"external_id"})
        if values["reporter_id"] is None:
            values["reporter_id"] = principal.user_id
        await self._check_users(values)
        values = {field: _plain(value) for field, value in values.items()}
        if values["status"] == WorkItemStatus.DONE.value:
            values["completed_at"] = utc_now()

        if data.external_id is not None:
            if await self.storage.get_work_item_by_external_id(data.external_id) is not None:
                raise conflict_for("ix_work_items_external_id")
            item = await self.storage.create_work_item(
                WorkItem(external_id=data.external_id, **values)
            )
        else:
            item = await self._create_with_generated_id(data.project_id, values)

        logger.info(
            "Work item created",
            work_item_id=item.id,
            external_id=item.external_id,
            type=item.type,
        )
        return item

    async def _create_with_generated_id(self, project_id: int, values: dict[str, Any]) -> WorkItem:
        """Insert with a generated ID, moving on to the next number if an
        explicit ID claimed the generated one in the meantime."""
        attempts = 0
        while True:
            external_id = await self.id_generator.generate(project_id)
            try:
                return await self.storage.create_work_item(
                    WorkItem(external_id=external_id, **values)
                )
            except ConflictError as e:
                attempts += 1
                if not _is_external_id_conflict(e) or attempts >= MAX_ALLOCATION_ATTEMPTS:
                    raise
                logger.info("Generated external ID collided, retrying", external_id=external_id)

    async def update(self, principal: Principal, item_id: int, data: WorkItemUpdate) -> WorkItem:
        item = await self.get(item_id)
        changes = {
            field: _plain(value)
            for field, value in data.model_dump(exclude_unset=True).items()
            if _plain(value) != getattr(item, field)
        }
        if not changes:
            return item

        # Anyone may move an item between statuses
        if set(changes) != {"status"}:
            authorize(principal, Operation.UPDATE, ResourceType.for_work_item(item.type))
            if "type" in changes:
                authorize(principal, Operation.UPDATE, ResourceType.for_work_item(changes["type"]))

        if "type" in changes or "parent_id" in changes:
            await self._check_hierarchy(item, changes)
        await self._check_users(changes)

        return await self._apply(principal, item, changes)

    async def update_status(
        self, principal: Principal, item_id: int, status: WorkItemStatus
    ) -> WorkItem:
        item = await self.get(item_id)
        if item.status == status.value:
            return item
        return await self._apply(principal, item, {"status": status.value})

    async def _check_hierarchy(self, item: WorkItem, changes: dict[str, Any]) -> None:
        new_type = changes.get("type", item.type)
        new_parent_id = changes.get("parent_id", item.parent_id)

        if new_parent_id is not None:
            parent = await self._get_parent(new_parent_id)
            self._check_pair(parent, new_type, item.project_id)
            await self._check_not_descendant(item, parent)

        if "type" in changes:
            for child in await self.storage.list_children(item.id):  # type: ignore[arg-type]
                if not validate_parent_child(new_type, child.type):
                    raise InvalidRelationshipError(
                        relationship_error_message(new_type, child.type)
                    )

    async def _apply(
        self, principal: Principal, item: WorkItem, changes: dict[str, Any]
    ) -> WorkItem:
        history = [
            WorkItemHistory(
                work_item_id=item.id,  # type: ignore[arg-type]
                user_id=principal.user_id,
                field=field,
                old_value=_history_value(getattr(item, field)),
                new_value=_history_value(value),
            )
            for field, value in changes.items()
        ]
        if changes.get("status") == WorkItemStatus.DONE.value:
            # Leaving DONE keeps the previous completion time
            changes = {**changes, "completed_at": utc_now()}

        item = await self.storage.update_work_item(item, changes, history)
        logger.info("Work item updated", work_item_id=item.id, fields=sorted(changes))
        return item

    async def delete(self, principal: Principal, item_id: int) -> None:
        """Delete a leaf work item.

        Raises:
            HasChildrenError: If any item names this one as its parent.
        """
        item = await self.get(item_id)
        authorize(principal, Operation.DELETE, ResourceType.for_work_item(item.type))
        if await self.storage.has_children(item_id):
            raise HasChildrenError()
        await self.storage.delete_work_item(item)
        logger.info("Work item deleted", work_item_id=item_id, external_id=item.external_id)


"""Work item endpoints, including comments, attachments and history."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from src.tracker.api.dependencies import ActivityServiceDep, CurrentPrincipal, WorkItemServiceDep
from src.tracker.models.enums import WorkItemPriority, WorkItemStatus, WorkItemType
from src.tracker.schemas.activity import (
    AttachmentCreate,
    AttachmentRead,
    CommentCreate,
    CommentRead,
    WorkItemHistoryRead,
)
from src.tracker.schemas.work_item import (
    WorkItemCreate,
    WorkItemRead,
    WorkItemStatusUpdate,
    WorkItemUpdate,
)
from src.tracker.storage import WorkItemFilters

router = APIRouter(prefix="/work-items", tags=["work-items"])


@router.post(
    "",
    response_model=WorkItemRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create work item",
    description=(
        "Create an epic, feature, story, task or bug. The external ID is generated "
        "from the project key unless one is supplied."
    ),
    responses={
        201: {"description": "Work item created"},
        400: {"description": "Invalid payload or parent/child relationship"},
        403: {"description": "Role may not create this type"},
        404: {"description": "Project or parent not found"},
        409: {"description": "External ID already in use"},
    },
)
async def create_work_item(
    data: WorkItemCreate, service: WorkItemServiceDep, principal: CurrentPrincipal
) -> WorkItemRead:
    return WorkItemRead.model_validate(await service.create(principal, data))


@router.get("", response_model=list[WorkItemRead], summary="List work items")
async def list_work_items(
    service: WorkItemServiceDep,
    _principal: CurrentPrincipal,
    project_id: Annotated[int | None, Query()] = None,
    type: Annotated[WorkItemType | None, Query()] = None,
    status: Annotated[WorkItemStatus | None, Query()] = None,
    priority: Annotated[WorkItemPriority | None, Query()] = None,
    assignee_id: Annotated[int | None, Query()] = None,
    unassigned: Annotated[bool, Query(description="Only items without an assignee")] = False,
) -> list[WorkItemRead]:
    filters = WorkItemFilters(
        project_id=project_id,
        type=type.value if type else None,
        status=status.value if status else None,
        priority=priority.value if priority else None,
        assignee_id=assignee_id,
        unassigned=unassigned,
    )
    return [WorkItemRead.model_validate(i) for i in await service.list_items(filters)]


@router.get(
    "/{item_id}",
    response_model=WorkItemRead,
    responses={404: {"description": "Work item not found"}},
)
async def get_work_item(
    item_id: int, service: WorkItemServiceDep, _principal: CurrentPrincipal
) -> WorkItemRead:
    return WorkItemRead.model_validate(await service.get(item_id))


@router.get(
    "/{item_id}/children",
    response_model=list[WorkItemRead],
    responses={404: {"description": "Work item not found"}},
)
async def list_children(
    item_id: int, service: WorkItemServiceDep, _principal: CurrentPrincipal
) -> list[WorkItemRead]:
    return [WorkItemRead.model_validate(i) for i in await service.list_children(item_id)]


@router.patch(
    "/{item_id}",
    response_model=WorkItemRead,
    summary="Update work item",
    responses={
        200: {"description": "Work item updated"},
        400: {"description": "Invalid payload or parent/child relationship"},
        403: {"description": "Role may not update this type"},
        404: {"description": "Work item or parent not found"},
    },
)
async def update_work_item(
    item_id: int,
    data: WorkItemUpdate,
    service: WorkItemServiceDep,
    principal: CurrentPrincipal,
) -> WorkItemRead:
    return WorkItemRead.model_validate(await service.update(principal, item_id, data))


@router.patch(
    "/{item_id}/status",
    response_model=WorkItemRead,
    summary="Change status",
    description="Any authenticated user may change a status. Entering DONE stamps completed_at.",
    responses={404: {"description": "Work item not found"}},
)
async def update_status(
    item_id: int,
    data: WorkItemStatusUpdate,
    service: WorkItemServiceDep,
    principal: CurrentPrincipal,
) -> WorkItemRead:
    return WorkItemRead.model_validate(await service.update_status(principal, item_id, data.status))


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        204: {"description": "Work item deleted"},
        400: {"description": "Work item has children"},
        403: {"description": "Role may not delete this type"},
        404: {"description": "Work item not found"},
    },
)
async def delete_work_item(
    item_id: int, service: WorkItemServiceDep, principal: CurrentPrincipal
) -> None:
    await service.delete(principal, item_id)


@router.get(
    "/{item_id}/comments",
    response_model=list[CommentRead],
    responses={404: {"description": "Work item not found"}},
)
async def list_comments(
    item_id: int, service: ActivityServiceDep, _principal: CurrentPrincipal
) -> list[CommentRead]:
    return [CommentRead.model_validate(c) for c in await service.list_comments(item_id)]


@router.post(
    "/{item_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"description": "Work item not found"}},
)
async def add_comment(
    item_id: int,
    data: CommentCreate,
    service: ActivityServiceDep,
    principal: CurrentPrincipal,
) -> CommentRead:
    return CommentRead.model_validate(await service.add_comment(principal, item_id, data))


@router.get(
    "/{item_id}/attachments",
    response_model=list[AttachmentRead],
    responses={404: {"description": "Work item not found"}},
)
async def list_attachments(
    item_id: int, service: ActivityServiceDep, _principal: CurrentPrincipal
) -> list[AttachmentRead]:
    return [AttachmentRead.model_validate(a) for a in await service.list_attachments(item_id)]


@router.post(
    "/{item_id}/attachments",
    response_model=AttachmentRead,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"description": "Work item not found"}},
)
async def add_attachment(
    item_id: int,
    data: AttachmentCreate,
    service: ActivityServiceDep,
    principal: CurrentPrincipal,
) -> AttachmentRead:
    return AttachmentRead.model_validate(await service.add_attachment(principal, item_id, data))


@router.get(
    "/{item_id}/history",
    response_model=list[WorkItemHistoryRead],
    summary="Change history, newest first",
    responses={404: {"description": "Work item not found"}},
)
async def list_history(
    item_id: int, service: ActivityServiceDep, _principal: CurrentPrincipal
) -> list[WorkItemHistoryRead]:
    return [WorkItemHistoryRead.model_validate(h) for h in await service.list_history(item_id)]

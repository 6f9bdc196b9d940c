"""Project endpoints."""

from fastapi import APIRouter, status

from src.tracker.api.dependencies import CurrentPrincipal, ProjectServiceDep, ReportServiceDep
from src.tracker.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from src.tracker.schemas.report import ProjectStatistics
from src.tracker.schemas.work_item import WorkItemRead

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=list[ProjectRead], summary="List projects")
async def list_projects(
    service: ProjectServiceDep, _principal: CurrentPrincipal
) -> list[ProjectRead]:
    return [ProjectRead.model_validate(p) for p in await service.list_all()]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(
    project_id: int, service: ProjectServiceDep, _principal: CurrentPrincipal
) -> ProjectRead:
    return ProjectRead.model_validate(await service.get(project_id))


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project. Status defaults to ACTIVE; the key can never change.",
    responses={
        201: {"description": "Project created"},
        403: {"description": "Only admins and scrum masters can create projects"},
        404: {"description": "Team not found"},
        409: {"description": "Project with this key already exists"},
    },
)
async def create_project(
    data: ProjectCreate, service: ProjectServiceDep, principal: CurrentPrincipal
) -> ProjectRead:
    return ProjectRead.model_validate(await service.create(principal, data))


@router.patch(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    responses={
        200: {"description": "Project updated"},
        403: {"description": "Only admins and scrum masters can update projects"},
        404: {"description": "Project or team not found"},
    },
)
async def update_project(
    project_id: int,
    data: ProjectUpdate,
    service: ProjectServiceDep,
    principal: CurrentPrincipal,
) -> ProjectRead:
    return ProjectRead.model_validate(await service.update(principal, project_id, data))


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Delete a project together with all of its work items.",
    responses={
        204: {"description": "Project deleted"},
        403: {"description": "Only admins can delete projects"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(
    project_id: int, service: ProjectServiceDep, principal: CurrentPrincipal
) -> None:
    await service.delete(principal, project_id)


@router.get(
    "/{project_id}/work-items",
    response_model=list[WorkItemRead],
    responses={404: {"description": "Project not found"}},
)
async def list_project_work_items(
    project_id: int, service: ProjectServiceDep, _principal: CurrentPrincipal
) -> list[WorkItemRead]:
    return [WorkItemRead.model_validate(i) for i in await service.list_work_items(project_id)]


@router.get(
    "/{project_id}/statistics",
    response_model=ProjectStatistics,
    responses={404: {"description": "Project not found"}},
)
async def project_statistics(
    project_id: int, service: ReportServiceDep, _principal: CurrentPrincipal
) -> ProjectStatistics:
    return await service.project_statistics(project_id)

"""Project management service."""

from src.tracker.core.authorization import Operation, Principal, ResourceType, authorize
from src.tracker.core.exceptions import NotFoundError
from src.tracker.core.logging import get_logger
from src.tracker.models import Project, WorkItem
from src.tracker.schemas.project import ProjectCreate, ProjectUpdate
from src.tracker.storage import Storage, WorkItemFilters

logger = get_logger(__name__)

# Explicit nulls for these are ignored on update
_NON_NULLABLE_FIELDS = frozenset({"name", "status"})


class ProjectService:
    def __init__(self, storage: Storage):
        self.storage = storage

    async def get(self, project_id: int) -> Project:
        project = await self.storage.get_project(project_id)
        if project is None:
            raise NotFoundError("Project not found")
        return project

    async def list_all(self) -> list[Project]:
        return await self.storage.list_projects()

    async def list_work_items(self, project_id: int) -> list[WorkItem]:
        await self.get(project_id)
        return await self.storage.list_work_items(WorkItemFilters(project_id=project_id))

    async def _ensure_team(self, team_id: int | None) -> None:
        if team_id is not None and await self.storage.get_team(team_id) is None:
            raise NotFoundError("Team not found")

    async def create(self, principal: Principal, data: ProjectCreate) -> Project:
        authorize(principal, Operation.CREATE, ResourceType.PROJECT)
        await self._ensure_team(data.team_id)

        project = Project(
            key=data.key,
            name=data.name,
            description=data.description,
            status=data.status.value,
            team_id=data.team_id,
            start_date=data.start_date,
            target_date=data.target_date,
            created_by=principal.user_id,
        )
        project = await self.storage.create_project(project)
        logger.info("Project created", project_id=project.id, key=project.key)
        return project

    async def update(self, principal: Principal, project_id: int, data: ProjectUpdate) -> Project:
        authorize(principal, Operation.UPDATE, ResourceType.PROJECT)
        project = await self.get(project_id)

        changes = data.model_dump(exclude_unset=True)
        for field in _NON_NULLABLE_FIELDS:
            if field in changes and changes[field] is None:
                del changes[field]
        if "status" in changes:
            changes["status"] = changes["status"].value
        if "team_id" in changes:
            await self._ensure_team(changes["team_id"])

        project = await self.storage.update_project(project, changes)
        logger.info("Project updated", project_id=project_id, fields=sorted(changes))
        return project

    async def delete(self, principal: Principal, project_id: int) -> None:
        """Delete a project and, with it, every work item and their activity."""
        authorize(principal, Operation.DELETE, ResourceType.PROJECT)
        project = await self.get(project_id)
        await self.storage.delete_project(project)
        logger.info("Project deleted", project_id=project_id)


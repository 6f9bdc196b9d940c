"""Repository for Project entity."""

from sqlalchemy import update
from sqlmodel import select

from src.tracker.models import Project
from src.tracker.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    model = Project

    async def list_by_team(self, team_id: int) -> list[Project]:
        result = await self.session.execute(
            select(Project).where(Project.team_id == team_id).order_by(Project.id)
        )
        return list(result.scalars().all())

    async def detach_team(self, team_id: int) -> None:
        """Set team_id to NULL on every project of a team (no commit)."""
        await self.session.execute(
            update(Project)
            .where(Project.team_id == team_id)  # type: ignore[arg-type]
            .values(team_id=None)
            .execution_options(synchronize_session=False)
        )

    async def increment_sequence(self, project_id: int) -> int | None:
        """Atomically bump the project's work item counter.

        Returns the new value, or None if the project does not exist.
        The row lock taken by the UPDATE serializes concurrent callers.
        """
        result = await self.session.execute(
            update(Project)
            .where(Project.id == project_id)  # type: ignore[arg-type]
            .values(item_sequence=Project.item_sequence + 1)
            .returning(Project.item_sequence)
            .execution_options(synchronize_session=False)
        )
        return result.scalar_one_or_none()

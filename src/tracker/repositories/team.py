"""Repositories for Team and TeamMember entities."""

from sqlalchemy import delete
from sqlmodel import select

from src.tracker.models import Team, TeamMember
from src.tracker.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    model = Team

    async def list_teams(self, active_only: bool = True) -> list[Team]:
        query = select(Team)
        if active_only:
            query = query.where(Team.is_active == True)  # noqa: E712
        result = await self.session.execute(query.order_by(Team.id))
        return list(result.scalars().all())

    async def list_by_user(self, user_id: int) -> list[Team]:
        """List teams the user is a member of."""
        result = await self.session.execute(
            select(Team)
            .join(TeamMember, TeamMember.team_id == Team.id)  # type: ignore[arg-type]
            .where(TeamMember.user_id == user_id)
            .order_by(Team.id)
        )
        return list(result.scalars().all())


class TeamMemberRepository(BaseRepository[TeamMember]):
    model = TeamMember

    async def get_membership(self, team_id: int, user_id: int) -> TeamMember | None:
        result = await self.session.execute(
            select(TeamMember).where(
                TeamMember.team_id == team_id,
                TeamMember.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_by_team(self, team_id: int) -> list[TeamMember]:
        result = await self.session.execute(
            select(TeamMember).where(TeamMember.team_id == team_id).order_by(TeamMember.id)
        )
        return list(result.scalars().all())

    async def delete_by_team(self, team_id: int) -> None:
        """Delete every membership of a team (no commit)."""
        await self.session.execute(delete(TeamMember).where(TeamMember.team_id == team_id))

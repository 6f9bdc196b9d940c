"""Team and membership management."""

from src.tracker.core.authorization import Operation, Principal, ResourceType, authorize
from src.tracker.core.exceptions import NotFoundError
from src.tracker.core.logging import get_logger
from src.tracker.models import Project, Team, TeamMember
from src.tracker.schemas.team import TeamCreate, TeamMemberCreate, TeamMemberRead
from src.tracker.schemas.user import UserRead
from src.tracker.storage import Storage, conflict_for

logger = get_logger(__name__)


class TeamService:
    def __init__(self, storage: Storage):
        self.storage = storage

    async def get(self, team_id: int) -> Team:
        team = await self.storage.get_team(team_id)
        if team is None:
            raise NotFoundError("Team not found")
        return team

    async def list_active(self) -> list[Team]:
        return await self.storage.list_teams(active_only=True)

    async def create(self, principal: Principal, data: TeamCreate) -> Team:
        authorize(principal, Operation.CREATE, ResourceType.TEAM)
        team = await self.storage.create_team(
            Team(name=data.name, description=data.description, created_by=principal.user_id)
        )
        logger.info("Team created", team_id=team.id)
        return team

    async def delete(self, principal: Principal, team_id: int) -> None:
        """Delete a team with its memberships; its projects lose their team."""
        authorize(principal, Operation.DELETE, ResourceType.TEAM)
        team = await self.get(team_id)
        await self.storage.delete_team(team)
        logger.info("Team deleted", team_id=team_id)

    async def add_member(
        self, principal: Principal, team_id: int, data: TeamMemberCreate
    ) -> TeamMember:
        authorize(principal, Operation.MANAGE_MEMBERS, ResourceType.TEAM)
        await self.get(team_id)
        if await self.storage.get_user(data.user_id) is None:
            raise NotFoundError("User not found")

        existing = await self.storage.list_team_members(team_id)
        if any(member.user_id == data.user_id for member in existing):
            raise conflict_for("uq_team_members_team_user")

        member = await self.storage.add_team_member(
            TeamMember(team_id=team_id, user_id=data.user_id, role=data.role.value)
        )
        logger.info("Team member added", team_id=team_id, member_user_id=data.user_id)
        return member

    async def remove_member(self, principal: Principal, team_id: int, user_id: int) -> None:
        """Remove a membership.

        Raises:
            NotFoundError: If the (team, user) pair is not a membership.
        """
        authorize(principal, Operation.MANAGE_MEMBERS, ResourceType.TEAM)
        removed = await self.storage.remove_team_member(team_id, user_id)
        if not removed:
            raise NotFoundError("Team member not found")
        logger.info("Team member removed", team_id=team_id, member_user_id=user_id)

    async def list_members(self, team_id: int) -> list[TeamMemberRead]:
        """Members of a team, each with its user embedded."""
        await self.get(team_id)
        members = []
        for member in await self.storage.list_team_members(team_id):
            user = await self.storage.get_user(member.user_id)
            read = TeamMemberRead.model_validate(member)
            read.user = UserRead.model_validate(user) if user is not None else None
            members.append(read)
        return members

    async def list_projects(self, team_id: int) -> list[Project]:
        await self.get(team_id)
        return await self.storage.list_projects_by_team(team_id)

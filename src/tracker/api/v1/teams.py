"""Team endpoints - teams, their members and their projects."""

from fastapi import APIRouter, status

from src.tracker.api.dependencies import CurrentPrincipal, TeamServiceDep
from src.tracker.schemas.project import ProjectRead
from src.tracker.schemas.team import TeamCreate, TeamMemberCreate, TeamMemberRead, TeamRead

router = APIRouter(prefix="/teams", tags=["teams"])


@router.post(
    "",
    response_model=TeamRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Team created"},
        403: {"description": "Only admins can create teams"},
    },
)
async def create_team(
    data: TeamCreate, service: TeamServiceDep, principal: CurrentPrincipal
) -> TeamRead:
    return TeamRead.model_validate(await service.create(principal, data))


@router.get("", response_model=list[TeamRead], summary="List active teams")
async def list_teams(service: TeamServiceDep, _principal: CurrentPrincipal) -> list[TeamRead]:
    return [TeamRead.model_validate(t) for t in await service.list_active()]


@router.get(
    "/{team_id}",
    response_model=TeamRead,
    responses={404: {"description": "Team not found"}},
)
async def get_team(team_id: int, service: TeamServiceDep, _principal: CurrentPrincipal) -> TeamRead:
    return TeamRead.model_validate(await service.get(team_id))


@router.delete(
    "/{team_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    description="Delete a team and its memberships. Its projects remain, without a team.",
    responses={
        204: {"description": "Team deleted"},
        403: {"description": "Only admins can delete teams"},
        404: {"description": "Team not found"},
    },
)
async def delete_team(team_id: int, service: TeamServiceDep, principal: CurrentPrincipal) -> None:
    await service.delete(principal, team_id)


@router.post(
    "/{team_id}/members",
    response_model=TeamMemberRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Member added"},
        403: {"description": "Only admins and scrum masters manage members"},
        404: {"description": "Team or user not found"},
        409: {"description": "User is already a member"},
    },
)
async def add_member(
    team_id: int,
    data: TeamMemberCreate,
    service: TeamServiceDep,
    principal: CurrentPrincipal,
) -> TeamMemberRead:
    member = await service.add_member(principal, team_id, data)
    return TeamMemberRead.model_validate(member)


@router.get(
    "/{team_id}/members",
    response_model=list[TeamMemberRead],
    responses={404: {"description": "Team not found"}},
)
async def list_members(
    team_id: int, service: TeamServiceDep, _principal: CurrentPrincipal
) -> list[TeamMemberRead]:
    return await service.list_members(team_id)


@router.delete(
    "/{team_id}/members/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        204: {"description": "Member removed"},
        403: {"description": "Only admins and scrum masters manage members"},
        404: {"description": "Membership not found"},
    },
)
async def remove_member(
    team_id: int, user_id: int, service: TeamServiceDep, principal: CurrentPrincipal
) -> None:
    await service.remove_member(principal, team_id, user_id)


@router.get(
    "/{team_id}/projects",
    response_model=list[ProjectRead],
    responses={404: {"description": "Team not found"}},
)
async def list_team_projects(
    team_id: int, service: TeamServiceDep, _principal: CurrentPrincipal
) -> list[ProjectRead]:
    return [ProjectRead.model_validate(p) for p in await service.list_projects(team_id)]

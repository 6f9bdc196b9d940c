"""User endpoints - signup, lookup and invitations."""

from fastapi import APIRouter, Response, status

from src.tracker.api.dependencies import CurrentPrincipal, UserServiceDep
from src.tracker.schemas.team import TeamRead
from src.tracker.schemas.user import UserCreate, UserInvite, UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Sign up",
    responses={
        201: {"description": "User created"},
        400: {"description": "Invalid payload or personal email domain"},
        409: {"description": "Email or username already taken"},
    },
)
async def signup(data: UserCreate, service: UserServiceDep) -> UserRead:
    user = await service.signup(data)
    return UserRead.model_validate(user)


@router.get("", response_model=list[UserRead], summary="List active users")
async def list_users(service: UserServiceDep, _principal: CurrentPrincipal) -> list[UserRead]:
    return [UserRead.model_validate(u) for u in await service.list_active()]


@router.post(
    "/invite",
    response_model=UserRead,
    summary="Invite user",
    description="Return the account for the email if it exists (200), otherwise create it (201).",
    responses={
        200: {"description": "User already exists"},
        201: {"description": "User created"},
        403: {"description": "Only admins and scrum masters can invite"},
    },
)
async def invite_user(
    data: UserInvite,
    response: Response,
    service: UserServiceDep,
    principal: CurrentPrincipal,
) -> UserRead:
    user, created = await service.invite(principal, data)
    if created:
        response.status_code = status.HTTP_201_CREATED
    return UserRead.model_validate(user)


@router.get(
    "/by-email/{email}",
    response_model=UserRead,
    responses={404: {"description": "User not found"}},
)
async def get_user_by_email(
    email: str, service: UserServiceDep, _principal: CurrentPrincipal
) -> UserRead:
    return UserRead.model_validate(await service.get_by_email(email))


@router.get(
    "/{user_id}",
    response_model=UserRead,
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: int, service: UserServiceDep, _principal: CurrentPrincipal) -> UserRead:
    return UserRead.model_validate(await service.get(user_id))


@router.get(
    "/{user_id}/teams",
    response_model=list[TeamRead],
    responses={404: {"description": "User not found"}},
)
async def list_user_teams(
    user_id: int, service: UserServiceDep, _principal: CurrentPrincipal
) -> list[TeamRead]:
    return [TeamRead.model_validate(t) for t in await service.list_teams(user_id)]

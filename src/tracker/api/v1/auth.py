"""Authentication endpoints."""

from fastapi import APIRouter

from src.tracker.api.dependencies import AuthServiceDep, CurrentUser
from src.tracker.schemas.auth import LoginRequest, LoginResponse
from src.tracker.schemas.user import UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        200: {
            "description": "Successful authentication",
            "content": {
                "application/json": {
                    "example": {
                        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                        "user": {"id": 1, "username": "jdoe", "role": "USER"},
                    }
                }
            },
        },
        401: {"description": "Invalid credentials"},
    },
)
async def login(login_data: LoginRequest, service: AuthServiceDep) -> LoginResponse:
    """Authenticate with email and password and receive a bearer token."""
    return await service.authenticate(login_data.email, login_data.password)


@router.get(
    "/me",
    response_model=UserRead,
    responses={401: {"description": "Not authenticated"}},
)
async def me(user: CurrentUser) -> UserRead:
    """Return the authenticated user."""
    return UserRead.model_validate(user)

"""Authentication dependencies - bearer token to request principal."""

from typing import Annotated

from fastapi import Depends, Header

from src.tracker.api.dependencies.services import AuthServiceDep
from src.tracker.core.authorization import Principal
from src.tracker.core.exceptions import UnauthorizedError
from src.tracker.core.logging import bind_user_context
from src.tracker.models import User


async def get_authenticated(
    auth_service: AuthServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> tuple[Principal, User]:
    """Resolve the Authorization header into (principal, user).

    Fails closed: a missing, malformed or expired token, or an unknown or
    inactive user, is a 401.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise UnauthorizedError("Missing or invalid authorization header")

    principal, user = await auth_service.resolve_token(authorization[7:])
    bind_user_context(principal.user_id, principal.role.value, user.email)
    return principal, user


Authenticated = Annotated[tuple[Principal, User], Depends(get_authenticated)]


async def get_current_principal(authenticated: Authenticated) -> Principal:
    return authenticated[0]


async def get_current_user(authenticated: Authenticated) -> User:
    return authenticated[1]


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
CurrentUser = Annotated[User, Depends(get_current_user)]

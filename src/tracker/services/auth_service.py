"""Authentication service - credential check and principal resolution."""

from src.tracker.core.authorization import Principal
from src.tracker.core.exceptions import UnauthorizedError
from src.tracker.core.logging import get_logger
from src.tracker.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    decode_token,
    verify_password,
)
from src.tracker.models import User
from src.tracker.models.base import utc_now
from src.tracker.schemas.auth import LoginResponse
from src.tracker.schemas.user import UserRead
from src.tracker.storage import Storage

logger = get_logger(__name__)


class AuthService:
    def __init__(self, storage: Storage):
        self.storage = storage

    async def authenticate(self, email: str, password: str) -> LoginResponse:
        """Verify credentials and issue an access token.

        Raises:
            UnauthorizedError: Unknown email, wrong password or disabled account.
        """
        user = await self.storage.get_user_by_email(email)

        # Always verify a hash so unknown emails take as long as wrong passwords
        password_hash = user.hashed_password if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or not password_valid or not user.is_active:
            logger.info("Login failed", reason="invalid_credentials")
            raise UnauthorizedError("Invalid credentials")

        user = await self.storage.update_user(user, {"last_login": utc_now()})
        logger.info("Login succeeded", user_id=user.id)
        return LoginResponse(
            access_token=create_access_token(user.id, user.role),  # type: ignore[arg-type]
            user=UserRead.model_validate(user),
        )

    async def resolve_token(self, token: str) -> tuple[Principal, User]:
        """Turn a bearer token into the request's principal.

        The role is read from the stored user, not from the token, so role
        changes and deactivation take effect immediately.
        """
        payload = decode_token(token)
        if payload is None or payload.get("type") != "access":
            raise UnauthorizedError("Invalid or expired token")

        try:
            user_id = int(payload.get("sub", ""))
        except ValueError:
            raise UnauthorizedError("Invalid or expired token") from None

        user = await self.storage.get_user(user_id)
        if user is None or not user.is_active:
            raise UnauthorizedError("User not found or inactive")
        return Principal(user_id=user_id, role=user.role_enum), user

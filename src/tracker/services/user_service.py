"""User signup, lookup, invitation and sample user seeding."""

from src.tracker.core.authorization import Operation, Principal, ResourceType, authorize
from src.tracker.core.exceptions import ForbiddenError, NotFoundError
from src.tracker.core.logging import get_logger
from src.tracker.core.security import generate_temporary_password, hash_password
from src.tracker.models import Team, User, UserRole
from src.tracker.schemas.user import UserCreate, UserInvite
from src.tracker.storage import Storage, conflict_for

logger = get_logger(__name__)

SAMPLE_USERS: dict[UserRole, tuple[str, str, str]] = {
    UserRole.ADMIN: ("admin", "admin@example.com", "Admin User"),
    UserRole.SCRUM_MASTER: ("scrummaster", "scrum.master@example.com", "Scrum Master"),
    UserRole.USER: ("user", "user@example.com", "Regular User"),
}


class UserService:
    """User management service."""

    def __init__(self, storage: Storage):
        self.storage = storage

    async def get(self, user_id: int) -> User:
        user = await self.storage.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def get_by_email(self, email: str) -> User:
        user = await self.storage.get_user_by_email(email)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def list_active(self) -> list[User]:
        return await self.storage.list_users(active_only=True)

    async def list_teams(self, user_id: int) -> list[Team]:
        await self.get(user_id)
        return await self.storage.list_teams_by_user(user_id)

    async def signup(self, data: UserCreate) -> User:
        """Create a USER account.

        Duplicates are checked up front for a precise error; the unique
        constraints still decide races.
        """
        if await self.storage.get_user_by_email(data.email) is not None:
            raise conflict_for("ix_users_email")
        if await self.storage.get_user_by_username(data.username) is not None:
            raise conflict_for("ix_users_username")

        user = await self.storage.create_user(
            User(
                username=data.username,
                email=data.email,
                full_name=data.full_name,
                hashed_password=hash_password(data.password),
                avatar_url=data.avatar_url,
                role=UserRole.USER.value,
            )
        )
        logger.info("User signed up", new_user_id=user.id)
        return user

    async def invite(self, principal: Principal, data: UserInvite) -> tuple[User, bool]:
        """Return the existing account for the email, or create one.

        Returns:
            (user, created) where created is False for an existing account.
        """
        authorize(principal, Operation.INVITE, ResourceType.USER)
        if data.role == UserRole.ADMIN and principal.role != UserRole.ADMIN:
            raise ForbiddenError("Only administrators can invite administrators")

        existing = await self.storage.get_user_by_email(data.email)
        if existing is not None:
            return existing, False

        local_part = data.email.split("@", 1)[0]
        username = data.username or local_part
        if await self.storage.get_user_by_username(username) is not None:
            raise conflict_for("ix_users_username")

        user = await self.storage.create_user(
            User(
                username=username,
                email=data.email,
                full_name=data.full_name or data.username or local_part,
                # Invited users set a real password through an out-of-band reset
                hashed_password=hash_password(generate_temporary_password()),
                role=data.role.value,
            )
        )
        logger.info("User invited", new_user_id=user.id, invited_role=user.role)
        return user, True

    async def seed_sample_users(self, password: str) -> list[User]:
        """Create one sample account per role that has no user yet."""
        existing_roles = {user.role for user in await self.storage.list_users(active_only=False)}
        created = []
        for role, (username, email, full_name) in SAMPLE_USERS.items():
            if role.value in existing_roles:
                continue
            if await self.storage.get_user_by_email(email) is not None:
                continue
            user = await self.storage.create_user(
                User(
                    username=username,
                    email=email,
                    full_name=full_name,
                    hashed_password=hash_password(password),
                    role=role.value,
                )
            )
            created.append(user)
            logger.info("Sample user created", new_user_id=user.id, role=role.value)
        return created

"""Repository for User entity."""

from sqlmodel import select

from src.tracker.models import User
from src.tracker.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email address."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def list_users(self, active_only: bool = True) -> list[User]:
        query = select(User)
        if active_only:
            query = query.where(User.is_active == True)  # noqa: E712
        result = await self.session.execute(query.order_by(User.id))
        return list(result.scalars().all())

"""User model."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.tracker.models.base import utc_now
from src.tracker.models.enums import UserRole


class User(SQLModel, table=True):
    """Account of a person using the tracker.

    Users are never hard-deleted; `is_active=False` disables the account.
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(max_length=50, unique=True, index=True)
    email: str = Field(max_length=100, unique=True, index=True)
    full_name: str = Field(max_length=100)
    hashed_password: str = Field(max_length=255)
    avatar_url: str | None = Field(default=None, max_length=255)
    role: str = Field(default=UserRole.USER.value, max_length=20)
    is_active: bool = Field(default=True)
    last_login: datetime | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def role_enum(self) -> UserRole:
        """Get role as UserRole enum."""
        return UserRole(self.role)

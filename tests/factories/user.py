"""User and team factories for test data generation."""

from uuid import uuid4

from polyfactory import Use

from src.tracker.core.security import hash_password
from src.tracker.models import Team, TeamMember, TeamRole, User, UserRole
from tests.factories.base import BaseFactory, utc_now

# Default test password - strong enough for zxcvbn
DEFAULT_TEST_PASSWORD = "vT9#qLm2!xR7wZp4"

_DEFAULT_TEST_PASSWORD_HASH = hash_password(DEFAULT_TEST_PASSWORD)


def _unique_name() -> str:
    return f"user_{uuid4().hex[:8]}"


class UserFactory(BaseFactory):
    """Factory for generating User test data."""

    __model__ = User

    id = None
    username = Use(_unique_name)
    email = Use(lambda: f"{_unique_name()}@acme.io")
    hashed_password = _DEFAULT_TEST_PASSWORD_HASH
    full_name = "Test User"
    avatar_url = None
    role = UserRole.USER.value
    is_active = True
    last_login = None
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def admin(cls, **kwargs):
        """Create an administrator."""
        return cls.build(
            role=UserRole.ADMIN.value,
            full_name=kwargs.pop("full_name", "Admin User"),
            **kwargs,
        )

    @classmethod
    def scrum_master(cls, **kwargs):
        return cls.build(
            role=UserRole.SCRUM_MASTER.value,
            full_name=kwargs.pop("full_name", "Scrum Master"),
            **kwargs,
        )

    @classmethod
    def inactive(cls, **kwargs):
        """Create a disabled account."""
        return cls.build(is_active=False, **kwargs)


class TeamFactory(BaseFactory):
    __model__ = Team

    id = None
    name = Use(lambda: f"Team {uuid4().hex[:6]}")
    description = None
    created_by = None
    is_active = True
    created_at = Use(utc_now)
    updated_at = Use(utc_now)


class TeamMemberFactory(BaseFactory):
    __model__ = TeamMember

    # FK fields - must be set explicitly
    id = None
    team_id = None
    user_id = None
    role = TeamRole.MEMBER.value
    joined_at = Use(utc_now)
    updated_at = Use(utc_now)

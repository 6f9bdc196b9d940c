"""Tests for signup, invitations and sample user seeding."""

import pytest

from src.tracker.core.authorization import Principal
from src.tracker.core.exceptions import ConflictError, ForbiddenError
from src.tracker.core.security import verify_password
from src.tracker.models import UserRole
from src.tracker.schemas.user import UserCreate, UserInvite
from src.tracker.services import UserService
from src.tracker.storage import MemoryStorage
from tests.factories import DEFAULT_TEST_PASSWORD


@pytest.fixture
def service(storage: MemoryStorage) -> UserService:
    return UserService(storage)


def signup_data(**overrides) -> UserCreate:
    data = {
        "username": "ada",
        "email": "ada@acme.io",
        "password": DEFAULT_TEST_PASSWORD,
        "full_name": "Ada Lovelace",
    }
    return UserCreate(**{**data, **overrides})


async def test_signup_creates_user_role(service: UserService):
    user = await service.signup(signup_data())

    assert user.role == UserRole.USER.value
    assert user.hashed_password != DEFAULT_TEST_PASSWORD
    assert verify_password(DEFAULT_TEST_PASSWORD, user.hashed_password)


async def test_signup_duplicate_email(service: UserService):
    await service.signup(signup_data())

    with pytest.raises(ConflictError) as exc_info:
        await service.signup(signup_data(username="ada2"))
    assert exc_info.value.errors[0]["path"] == "email"


async def test_signup_duplicate_username(service: UserService):
    await service.signup(signup_data())

    with pytest.raises(ConflictError) as exc_info:
        await service.signup(signup_data(email="other@acme.io"))
    assert exc_info.value.errors[0]["path"] == "username"


async def test_invite_creates_then_returns_existing(service: UserService, admin: Principal):
    invited, created = await service.invite(admin, UserInvite(email="grace@acme.io"))
    assert created is True
    assert invited.username == "grace"
    assert invited.role == UserRole.USER.value

    again, created = await service.invite(admin, UserInvite(email="grace@acme.io"))
    assert created is False
    assert again.id == invited.id


async def test_user_cannot_invite(service: UserService, user: Principal):
    with pytest.raises(ForbiddenError):
        await service.invite(user, UserInvite(email="grace@acme.io"))


async def test_scrum_master_cannot_invite_admin(service: UserService, scrum_master: Principal):
    with pytest.raises(ForbiddenError):
        await service.invite(scrum_master, UserInvite(email="boss@acme.io", role=UserRole.ADMIN))


async def test_admin_can_invite_admin(service: UserService, admin: Principal):
    invited, _ = await service.invite(admin, UserInvite(email="boss@acme.io", role=UserRole.ADMIN))
    assert invited.role == UserRole.ADMIN.value


async def test_seed_sample_users_once(service: UserService, storage: MemoryStorage):
    created = await service.seed_sample_users(DEFAULT_TEST_PASSWORD)
    assert {user.role for user in created} == {role.value for role in UserRole}

    assert await service.seed_sample_users(DEFAULT_TEST_PASSWORD) == []
    assert len(await storage.list_users(active_only=False)) == 3


async def test_seed_skips_roles_already_present(service: UserService, admin: Principal):
    created = await service.seed_sample_users(DEFAULT_TEST_PASSWORD)
    assert UserRole.ADMIN.value not in {user.role for user in created}

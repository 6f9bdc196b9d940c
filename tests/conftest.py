"""Root test fixtures shared across all test types.

The app under test runs on MemoryStorage; no database is needed.
"""

import os

# Must be set before any app imports
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-0123456789abcdef0123456789abcdef")
# Cheap hashing keeps the suite fast
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")
os.environ.pop("DATABASE_URL", None)
os.environ.pop("SEED_SAMPLE_USERS", None)

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.tracker.core.authorization import Principal
from src.tracker.core.config import get_settings
from src.tracker.core.health import reset_health_cache
from src.tracker.main import create_app
from src.tracker.models import User
from src.tracker.storage import MemoryStorage
from tests.factories import UserFactory
from tests.helpers import auth_headers, principal_for

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


# --- Storage and app ---


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def app(storage: MemoryStorage) -> FastAPI:
    reset_health_cache()
    application = create_app()
    application.state.memory_storage = storage
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


# --- Users, one per role ---


@pytest.fixture
async def admin_user(storage: MemoryStorage) -> User:
    return await storage.create_user(UserFactory.admin())


@pytest.fixture
async def scrum_master_user(storage: MemoryStorage) -> User:
    return await storage.create_user(UserFactory.scrum_master())


@pytest.fixture
async def regular_user(storage: MemoryStorage) -> User:
    return await storage.create_user(UserFactory.build())


@pytest.fixture
def admin_headers(admin_user: User) -> dict[str, str]:
    return auth_headers(admin_user)


@pytest.fixture
def scrum_master_headers(scrum_master_user: User) -> dict[str, str]:
    return auth_headers(scrum_master_user)


@pytest.fixture
def user_headers(regular_user: User) -> dict[str, str]:
    return auth_headers(regular_user)


@pytest.fixture
def admin(admin_user: User) -> Principal:
    return principal_for(admin_user)


@pytest.fixture
def scrum_master(scrum_master_user: User) -> Principal:
    return principal_for(scrum_master_user)


@pytest.fixture
def user(regular_user: User) -> Principal:
    return principal_for(regular_user)

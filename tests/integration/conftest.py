"""Integration fixtures running storage and HTTP tests against PostgreSQL.

Point TEST_DATABASE_URL at a disposable postgresql+asyncpg database to run
them; they are skipped otherwise. The schema comes from the Alembic
migrations and every table is emptied before each test.
"""

import asyncio
import os
from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from src.tracker.core.config import get_settings
from src.tracker.core.db import dispose_engine, run_migrations_sync
from src.tracker.core.health import reset_health_cache
from src.tracker.main import create_app
from src.tracker.storage import DatabaseStorage

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL")

TABLES = (
    "work_item_history, attachments, comments, work_items, "
    "projects, team_members, teams, users"
)


@pytest.fixture
async def engine(monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[AsyncEngine]:
    """Migrated, empty test database; the app's settings point at it too."""
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL is not set")

    monkeypatch.setenv("DATABASE_URL", TEST_DATABASE_URL)
    get_settings.cache_clear()
    await dispose_engine()

    await asyncio.to_thread(run_migrations_sync)

    test_engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)
    async with test_engine.begin() as conn:
        await conn.execute(text(f"TRUNCATE {TABLES} RESTART IDENTITY CASCADE"))

    yield test_engine

    await test_engine.dispose()
    await dispose_engine()
    get_settings.cache_clear()


@pytest.fixture
async def storage(engine: AsyncEngine) -> AsyncGenerator[DatabaseStorage]:
    """DatabaseStorage on its own session, replacing the in-memory backend.

    The user fixtures in the root conftest store their users through it.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield DatabaseStorage(session)


@pytest.fixture
def app(engine: AsyncEngine) -> FastAPI:
    """App built with DATABASE_URL set, so each request opens its own session."""
    reset_health_cache()
    return create_app()

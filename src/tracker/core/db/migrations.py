"""Reusable migration runner for both production and tests."""

import asyncio
from concurrent.futures import ThreadPoolExecutor

from alembic.config import Config

from alembic import command


def run_migrations_sync() -> None:
    """Run Alembic migrations synchronously up to head."""
    alembic_cfg = Config("alembic.ini")
    command.upgrade(alembic_cfg, "head")


async def run_migrations_async() -> None:
    """Run Alembic migrations from async context.

    Uses ThreadPoolExecutor to avoid event loop conflicts with Alembic.
    """
    loop = asyncio.get_running_loop()
    with ThreadPoolExecutor() as pool:
        await loop.run_in_executor(pool, run_migrations_sync)

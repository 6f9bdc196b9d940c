"""Storage dependency - in-memory or database-backed per app configuration."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request

from src.tracker.core.db import get_session
from src.tracker.storage import DatabaseStorage, Storage


async def get_storage(request: Request) -> AsyncGenerator[Storage]:
    """Yield the app's storage backend.

    The in-memory backend lives on app.state for the lifetime of the app;
    otherwise each request gets a DatabaseStorage on its own session.
    """
    memory_storage = getattr(request.app.state, "memory_storage", None)
    if memory_storage is not None:
        yield memory_storage
        return

    async with get_session() as session:
        yield DatabaseStorage(session)


StorageDep = Annotated[Storage, Depends(get_storage)]

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.tracker.api.middlewares import setup_middlewares
from src.tracker.api.v1.router import api_router
from src.tracker.core.config import get_settings
from src.tracker.core.db import dispose_engine, get_session, run_migrations_async
from src.tracker.core.exceptions import setup_exception_handlers
from src.tracker.core.health import setup_health_endpoint, setup_metrics
from src.tracker.core.logging import get_logger, setup_logging
from src.tracker.services import UserService
from src.tracker.storage import DatabaseStorage, MemoryStorage, Storage

logger = get_logger(__name__)


async def _seed_sample_users(storage: Storage, password: str) -> None:
    created = await UserService(storage).seed_sample_users(password)
    logger.info("Sample users seeded", created=len(created))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(
        f"Starting {settings.app_name}",
        storage="memory" if settings.uses_memory_storage else "database",
    )

    if settings.database_url is not None and settings.database_auto_migrate:
        logger.info("Applying database migrations")
        await run_migrations_async()

    if settings.seed_sample_users and settings.sample_user_password:
        if app.state.memory_storage is not None:
            await _seed_sample_users(app.state.memory_storage, settings.sample_user_password)
        else:
            async with get_session() as session:
                await _seed_sample_users(DatabaseStorage(session), settings.sample_user_password)

    yield

    logger.info("Closing connections...")
    if settings.database_url is not None:
        await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "Login and the current user"},
    {"name": "users", "description": "Signup, user lookup and invitations"},
    {"name": "teams", "description": "Teams and team membership"},
    {"name": "projects", "description": "Projects and project statistics"},
    {"name": "work-items", "description": "Epics, features, stories, tasks and bugs"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Work item tracker: epics, features, stories, tasks and bugs",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    # Without a database everything lives in process memory
    app.state.memory_storage = MemoryStorage() if settings.uses_memory_storage else None

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(api_router)

    setup_metrics(app)
    setup_health_endpoint(app)

    return app


app = create_app()

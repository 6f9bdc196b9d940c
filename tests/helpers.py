"""Test helper functions for common data creation patterns."""

from httpx import AsyncClient

from src.tracker.core.authorization import Principal
from src.tracker.core.security import create_access_token
from src.tracker.models import Project, User
from src.tracker.storage import MemoryStorage
from tests.factories import ProjectFactory


def auth_headers(user: User) -> dict[str, str]:
    """Bearer header for a stored user."""
    token = create_access_token(user.id, user.role)  # type: ignore[arg-type]
    return {"Authorization": f"Bearer {token}"}


def principal_for(user: User) -> Principal:
    return Principal(user_id=user.id, role=user.role_enum)  # type: ignore[arg-type]


async def create_project(storage: MemoryStorage, **kwargs) -> Project:
    """Store a project built by ProjectFactory."""
    return await storage.create_project(ProjectFactory.build(**kwargs))


async def post_item(
    client: AsyncClient,
    headers: dict[str, str],
    project_id: int,
    item_type: str,
    title: str = "Item",
    **fields,
) -> dict:
    """Create a work item through the API and return the response body.

    Fails the test if the item was not created.
    """
    response = await client.post(
        "/api/v1/work-items",
        json={"type": item_type, "project_id": project_id, "title": title, **fields},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()

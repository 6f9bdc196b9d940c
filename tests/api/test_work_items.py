"""Tests for work item endpoints, including the hierarchy and role rules."""

from datetime import datetime

import pytest
from httpx import AsyncClient

from src.tracker.models import Project, User
from src.tracker.storage import MemoryStorage
from tests.helpers import create_project, post_item


@pytest.fixture
async def project(storage: MemoryStorage) -> Project:
    return await create_project(storage, key="ALPHA", name="Alpha")


async def test_external_ids_follow_project_key(client: AsyncClient, project, admin_headers):
    first = await post_item(client, admin_headers, project.id, "EPIC", title="E1")
    second = await post_item(client, admin_headers, project.id, "EPIC", title="E2")

    assert first["external_id"] == "ALPHA-001"
    assert second["external_id"] == "ALPHA-002"


async def test_hierarchy_scenario(client: AsyncClient, project, admin_headers):
    epic = await post_item(client, admin_headers, project.id, "EPIC")
    await post_item(client, admin_headers, project.id, "FEATURE", parent_id=epic["id"])

    response = await client.post(
        "/api/v1/work-items",
        json={"type": "STORY", "project_id": project.id, "title": "S", "parent_id": epic["id"]},
        headers=admin_headers,
    )

    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "STORY cannot have EPIC as parent"
    assert data["errors"] == [{"path": "parent_id", "message": "STORY cannot have EPIC as parent"}]


async def test_user_creates_story_but_not_epic_or_feature(
    client: AsyncClient, project, user_headers
):
    for item_type in ("EPIC", "FEATURE"):
        response = await client.post(
            "/api/v1/work-items",
            json={"type": item_type, "project_id": project.id, "title": "Nope"},
            headers=user_headers,
        )
        assert response.status_code == 403

    story = await post_item(client, user_headers, project.id, "STORY")
    assert story["external_id"] == "ALPHA-001"


async def test_delete_with_children_fails(client: AsyncClient, project, admin_headers):
    epic = await post_item(client, admin_headers, project.id, "EPIC")
    feature = await post_item(client, admin_headers, project.id, "FEATURE", parent_id=epic["id"])

    response = await client.delete(f"/api/v1/work-items/{epic['id']}", headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == "id"

    children = await client.get(f"/api/v1/work-items/{epic['id']}/children", headers=admin_headers)
    assert [c["id"] for c in children.json()] == [feature["id"]]


async def test_delete_leaf(client: AsyncClient, project, admin_headers):
    task = await post_item(client, admin_headers, project.id, "TASK")

    response = await client.delete(f"/api/v1/work-items/{task['id']}", headers=admin_headers)
    assert response.status_code == 204

    response = await client.get(f"/api/v1/work-items/{task['id']}", headers=admin_headers)
    assert response.status_code == 404


async def test_status_endpoint_stamps_done(
    client: AsyncClient, project, admin_headers, user_headers
):
    epic = await post_item(client, admin_headers, project.id, "EPIC")
    url = f"/api/v1/work-items/{epic['id']}/status"

    # Any authenticated user may move status, even on an epic
    done = await client.patch(url, json={"status": "DONE"}, headers=user_headers)
    assert done.status_code == 200
    completed_at = done.json()["completed_at"]
    assert completed_at is not None
    assert datetime.fromisoformat(completed_at) >= datetime.fromisoformat(epic["updated_at"])

    reopened = await client.patch(url, json={"status": "IN_PROGRESS"}, headers=user_headers)
    assert reopened.json()["completed_at"] == completed_at


async def test_patch_records_history(client: AsyncClient, project, admin_headers):
    task = await post_item(client, admin_headers, project.id, "TASK", title="Old")

    response = await client.patch(
        f"/api/v1/work-items/{task['id']}",
        json={"title": "New", "priority": "HIGH"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["title"] == "New"

    history = await client.get(f"/api/v1/work-items/{task['id']}/history", headers=admin_headers)
    fields = {h["field"]: (h["old_value"], h["new_value"]) for h in history.json()}
    assert fields == {"title": ("Old", "New"), "priority": ("MEDIUM", "HIGH")}


async def test_patch_null_title_rejected(client: AsyncClient, project, admin_headers):
    task = await post_item(client, admin_headers, project.id, "TASK")

    response = await client.patch(
        f"/api/v1/work-items/{task['id']}", json={"title": None}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == "title"


async def test_explicit_external_id_conflict(client: AsyncClient, project, admin_headers):
    await post_item(client, admin_headers, project.id, "TASK", external_id="LEGACY-1")

    response = await client.post(
        "/api/v1/work-items",
        json={"type": "TASK", "project_id": project.id, "title": "T", "external_id": "LEGACY-1"},
        headers=admin_headers,
    )

    assert response.status_code == 409
    assert response.json()["errors"][0]["path"] == "external_id"


async def test_invalid_payload_paths(client: AsyncClient, project, admin_headers):
    response = await client.post(
        "/api/v1/work-items",
        json={"type": "SAGA", "project_id": project.id, "title": "   "},
        headers=admin_headers,
    )

    assert response.status_code == 400
    paths = {error["path"] for error in response.json()["errors"]}
    assert paths == {"type", "title"}


async def test_filters(client: AsyncClient, project, admin_headers, regular_user: User):
    bug = await post_item(
        client, admin_headers, project.id, "BUG", assignee_id=regular_user.id, priority="HIGH"
    )
    story = await post_item(client, admin_headers, project.id, "STORY")

    async def ids(**params) -> list[int]:
        response = await client.get("/api/v1/work-items", params=params, headers=admin_headers)
        assert response.status_code == 200
        return [item["id"] for item in response.json()]

    assert await ids(type="BUG") == [bug["id"]]
    assert await ids(priority="HIGH") == [bug["id"]]
    assert await ids(assignee_id=regular_user.id) == [bug["id"]]
    assert await ids(unassigned="true") == [story["id"]]
    assert await ids(project_id=project.id) == [bug["id"], story["id"]]

    response = await client.get(
        "/api/v1/work-items", params={"status": "BLOCKED"}, headers=admin_headers
    )
    assert response.status_code == 400


async def test_comments_and_attachments(client: AsyncClient, project, admin_headers, user_headers):
    task = await post_item(client, admin_headers, project.id, "TASK")
    base = f"/api/v1/work-items/{task['id']}"

    for content in ("first", "second"):
        response = await client.post(
            f"{base}/comments", json={"content": content}, headers=user_headers
        )
        assert response.status_code == 201

    comments = await client.get(f"{base}/comments", headers=admin_headers)
    assert [c["content"] for c in comments.json()] == ["first", "second"]

    attachment = await client.post(
        f"{base}/attachments",
        json={
            "file_name": "trace.log",
            "file_size": 2048,
            "file_type": "text/plain",
            "file_path": "/uploads/trace.log",
        },
        headers=user_headers,
    )
    assert attachment.status_code == 201
    listing = await client.get(f"{base}/attachments", headers=admin_headers)
    assert [a["file_name"] for a in listing.json()] == ["trace.log"]

    missing = await client.post(
        "/api/v1/work-items/999/comments", json={"content": "x"}, headers=user_headers
    )
    assert missing.status_code == 404

"""Tests for project endpoints."""

from httpx import AsyncClient

from src.tracker.storage import MemoryStorage
from tests.helpers import create_project, post_item


async def test_create_then_get_round_trip(client: AsyncClient, scrum_master_headers):
    created = await client.post(
        "/api/v1/projects", json={"key": "ALPHA", "name": "Alpha"}, headers=scrum_master_headers
    )
    assert created.status_code == 201

    fetched = await client.get(
        f"/api/v1/projects/{created.json()['id']}", headers=scrum_master_headers
    )
    data = fetched.json()
    assert (data["key"], data["name"], data["status"]) == ("ALPHA", "Alpha", "ACTIVE")


async def test_user_cannot_create_project(client: AsyncClient, user_headers):
    response = await client.post(
        "/api/v1/projects", json={"key": "ALPHA", "name": "Alpha"}, headers=user_headers
    )
    assert response.status_code == 403


async def test_duplicate_key(client: AsyncClient, admin_headers):
    payload = {"key": "ALPHA", "name": "Alpha"}
    await client.post("/api/v1/projects", json=payload, headers=admin_headers)

    response = await client.post("/api/v1/projects", json=payload, headers=admin_headers)

    assert response.status_code == 409
    assert response.json()["errors"][0]["path"] == "key"


async def test_invalid_key(client: AsyncClient, admin_headers):
    response = await client.post(
        "/api/v1/projects", json={"key": "alpha", "name": "Alpha"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == "key"


async def test_unknown_team(client: AsyncClient, admin_headers):
    response = await client.post(
        "/api/v1/projects",
        json={"key": "ALPHA", "name": "Alpha", "team_id": 999},
        headers=admin_headers,
    )
    assert response.status_code == 404


async def test_update_cannot_change_key(
    client: AsyncClient, storage: MemoryStorage, scrum_master_headers
):
    project = await create_project(storage, key="ALPHA")

    response = await client.patch(
        f"/api/v1/projects/{project.id}",
        json={"key": "BETA", "name": "Renamed", "status": "ARCHIVED"},
        headers=scrum_master_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["key"] == "ALPHA"
    assert data["name"] == "Renamed"
    assert data["status"] == "ARCHIVED"


async def test_only_admin_deletes_project(
    client: AsyncClient, storage: MemoryStorage, admin_headers, scrum_master_headers, user_headers
):
    project = await create_project(storage)

    for headers in (scrum_master_headers, user_headers):
        response = await client.delete(f"/api/v1/projects/{project.id}", headers=headers)
        assert response.status_code == 403

    response = await client.delete(f"/api/v1/projects/{project.id}", headers=admin_headers)
    assert response.status_code == 204


async def test_delete_project_removes_items(
    client: AsyncClient, storage: MemoryStorage, admin_headers
):
    project = await create_project(storage)
    item = await post_item(client, admin_headers, project.id, "TASK")
    await client.post(
        f"/api/v1/work-items/{item['id']}/comments", json={"content": "hi"}, headers=admin_headers
    )

    await client.delete(f"/api/v1/projects/{project.id}", headers=admin_headers)

    response = await client.get(f"/api/v1/work-items/{item['id']}", headers=admin_headers)
    assert response.status_code == 404
    assert await storage.list_comments(item["id"]) == []


async def test_project_work_items_and_statistics(
    client: AsyncClient, storage: MemoryStorage, admin_headers
):
    project = await create_project(storage, key="ALPHA")
    await post_item(client, admin_headers, project.id, "EPIC", status="DONE")
    await post_item(client, admin_headers, project.id, "STORY")

    items = await client.get(f"/api/v1/projects/{project.id}/work-items", headers=admin_headers)
    assert [i["external_id"] for i in items.json()] == ["ALPHA-001", "ALPHA-002"]

    stats = await client.get(f"/api/v1/projects/{project.id}/statistics", headers=admin_headers)
    assert stats.status_code == 200
    data = stats.json()
    assert data["total_items"] == 2
    assert data["completion_percentage"] == 50
    assert data["type_counts"] == {"EPIC": 1, "STORY": 1}


async def test_statistics_with_offset_dates(client: AsyncClient, admin_headers):
    created = await client.post(
        "/api/v1/projects",
        json={"key": "TZP", "name": "Tz", "target_date": "2030-01-01T00:00:00Z"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    project = created.json()
    assert project["target_date"] == "2030-01-01T00:00:00"

    task = await post_item(
        client, admin_headers, project["id"], "TASK", start_date="2020-01-01T02:00:00+02:00"
    )
    assert task["start_date"] == "2020-01-01T00:00:00"
    done = await client.patch(
        f"/api/v1/work-items/{task['id']}/status", json={"status": "DONE"}, headers=admin_headers
    )
    assert done.status_code == 200

    stats = await client.get(f"/api/v1/projects/{project['id']}/statistics", headers=admin_headers)
    assert stats.status_code == 200
    data = stats.json()
    assert data["avg_time_to_resolve"] > 0
    assert data["timeline"]["days_remaining"] > 0

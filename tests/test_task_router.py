"""HTTP surface of /api/tasks with the service backed by in-memory repositories."""

import re
import uuid

import pytest

pytestmark = pytest.mark.unit

DISPLAY_TIMESTAMP = re.compile(r"^[A-Z][a-z]{2} \d{2}, \d{4} \d{2}:\d{2}$")


async def _create(client, **fields):
    response = await client.post("/api/tasks", json=fields)
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_create_task_returns_camel_case_task(client):
    body = await _create(client, title="Write docs", dueDate="2026-11-01", priority="high", id=str(uuid.uuid4()))

    assert set(body) == {
        "id", "title", "description", "dueDate", "completed",
        "createdAt", "updatedAt", "priority", "comments",
    }
    assert body["title"] == "Write docs"
    assert body["dueDate"] == "2026-11-01"
    assert body["completed"] is False
    assert DISPLAY_TIMESTAMP.match(body["createdAt"])
    assert DISPLAY_TIMESTAMP.match(body["updatedAt"])
    assert body["comments"] == []


@pytest.mark.asyncio
async def test_create_task_without_body_is_bad_request(client):
    response = await client.post("/api/tasks")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "invalid_argument"


@pytest.mark.asyncio
async def test_get_unknown_task_is_not_found(client):
    response = await client.get(f"/api/tasks/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "not_found"


@pytest.mark.asyncio
async def test_malformed_task_id_is_bad_request(client):
    response = await client.get("/api/tasks/not-a-uuid")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "invalid_argument"


@pytest.mark.asyncio
async def test_put_replaces_fields(client):
    created = await _create(client, title="Old", description="old")

    response = await client.put(
        f"/api/tasks/{created['id']}",
        json={"title": "New", "description": "new", "completed": True, "priority": "low",
              "createdAt": "Jan 01, 2020 00:00"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["title"] == "New"
    assert body["completed"] is True
    assert body["createdAt"] == created["createdAt"]


@pytest.mark.asyncio
async def test_put_unknown_task_is_not_found(client):
    response = await client.put(f"/api/tasks/{uuid.uuid4()}", json={"title": "x"})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_patch_only_reads_completed(client):
    created = await _create(client, title="Keep title")

    response = await client.patch(f"/api/tasks/{created['id']}", json={"completed": True, "title": "ignored"})

    assert response.status_code == 200
    body = response.json()
    assert body["completed"] is True
    assert body["title"] == "Keep title"


@pytest.mark.asyncio
async def test_patch_without_body_is_bad_request(client, store):
    created = await _create(client, title="Untouched")
    store.calls.clear()

    response = await client.patch(f"/api/tasks/{created['id']}")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "invalid_argument"
    assert store.calls == []


@pytest.mark.asyncio
async def test_patch_with_empty_object_marks_not_completed(client):
    created = await _create(client, title="Done then undone", completed=True)
    assert created["completed"] is True

    response = await client.patch(f"/api/tasks/{created['id']}", json={})

    assert response.status_code == 200
    assert response.json()["completed"] is False


@pytest.mark.asyncio
async def test_list_returns_at_most_five_and_accepts_filters(client):
    for i in range(6):
        await _create(client, title=f"task {i}")

    response = await client.get(
        "/api/tasks",
        params={"search": "task", "completed": "false", "dueDate": "2026-10-19", "filterType": "today"},
    )

    assert response.status_code == 200
    titles = [t["title"] for t in response.json()]
    assert titles == ["task 5", "task 4", "task 3", "task 2", "task 1"]


@pytest.mark.asyncio
async def test_list_with_bad_due_date_is_bad_request(client):
    response = await client.get("/api/tasks", params={"dueDate": "19/10/2026"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_then_get_is_not_found(client):
    created = await _create(client, title="Delete me")

    response = await client.delete(f"/api/tasks/{created['id']}")
    assert response.status_code == 200
    assert response.content == b""

    response = await client.get(f"/api/tasks/{created['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_unknown_task_is_not_found(client):
    response = await client.delete(f"/api/tasks/{uuid.uuid4()}")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_add_and_remove_comment(client):
    created = await _create(client, title="Discuss")

    response = await client.post(f"/api/tasks/{created['id']}/comments", json={"text": "hi"})
    assert response.status_code == 200
    comments = response.json()["comments"]
    assert len(comments) == 1
    assert set(comments[0]) == {"id", "text", "timeStamp"}
    assert DISPLAY_TIMESTAMP.match(comments[0]["timeStamp"])

    response = await client.delete(f"/api/tasks/{created['id']}/comments/{comments[0]['id']}")
    assert response.status_code == 200
    assert response.json()["comments"] == []


@pytest.mark.asyncio
async def test_add_comment_to_unknown_task_is_not_found(client):
    response = await client.post(f"/api/tasks/{uuid.uuid4()}/comments", json={"text": "hi"})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_store_failure_is_internal_error_without_cause(client, store):
    store.fail_on.add("task.find_recent")

    response = await client.get("/api/tasks")

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "internal_error"
    assert error["message"] == "Failed to fetch tasks"
    assert "DB error" not in response.text

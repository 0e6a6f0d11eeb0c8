from __future__ import annotations

import uuid
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from todo_api.config import Settings
from todo_api.domains.todos.store import TodoStore
from todo_api.main import create_app


@pytest.fixture
def client() -> TestClient:
    app = create_app(settings=Settings(), store=TodoStore())
    return TestClient(app)


def _create(client: TestClient, title: str, content: str | None = None) -> dict:
    body = {"title": title}
    if content is not None:
        body["content"] = content
    resp = client.post("/todos", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]["todo"]


def _parse(timestamp: str) -> datetime:
    return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))


def test_health_returns_static_message(client: TestClient) -> None:
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "message": Settings().health_message}


def test_end_to_end_scenario(client: TestClient) -> None:
    resp = client.post("/todos", json={"title": "Buy milk", "content": "2%"})
    assert resp.status_code == 201
    payload = resp.json()
    assert payload["status"] == "success"
    todo = payload["data"]["todo"]
    assert todo["completed"] is False
    todo_id = todo["id"]
    uuid.UUID(todo_id)

    resp = client.post("/todos", json={"title": "Buy milk", "content": "skim"})
    assert resp.status_code == 409
    assert resp.json() == {
        "status": "fail",
        "message": "Todo with title: 'Buy milk' already exists",
    }
    assert client.get("/todos").json()["results"] == 1

    resp = client.patch(f"/todos/{todo_id}", json={"completed": True})
    assert resp.status_code == 200
    updated = resp.json()["data"]["todo"]
    assert updated["completed"] is True
    assert updated["title"] == "Buy milk"
    assert updated["content"] == "2%"
    assert updated["createdAt"] == todo["createdAt"]
    assert _parse(updated["updatedAt"]) >= _parse(todo["updatedAt"])

    resp = client.delete(f"/todos/{todo_id}")
    assert resp.status_code == 204
    assert resp.content == b""

    resp = client.get(f"/todos/{todo_id}")
    assert resp.status_code == 404
    assert resp.json() == {"status": "fail", "message": f"Todo with ID: {todo_id} not found"}


def test_todo_json_uses_camel_case_timestamps(client: TestClient) -> None:
    todo = _create(client, "Walk dog")

    assert set(todo) == {"id", "title", "content", "completed", "createdAt", "updatedAt"}
    assert todo["content"] == ""
    assert todo["createdAt"] == todo["updatedAt"]


def test_list_envelope_and_pagination(client: TestClient) -> None:
    titles = [f"todo {i}" for i in range(5)]
    for title in titles:
        _create(client, title)

    resp = client.get("/todos", params={"page": 2, "limit": 2})

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["status"] == "success"
    assert payload["results"] == 2
    assert [t["title"] for t in payload["todos"]] == titles[2:4]


def test_list_defaults_to_ten_per_page(client: TestClient) -> None:
    for i in range(12):
        _create(client, f"todo {i}")

    payload = client.get("/todos").json()

    assert payload["results"] == 10
    assert payload["todos"][0]["title"] == "todo 0"


def test_list_on_empty_store(client: TestClient) -> None:
    resp = client.get("/todos", params={"page": 1, "limit": 10})

    assert resp.json() == {"status": "success", "results": 0, "todos": []}


def test_list_past_the_end_is_empty(client: TestClient) -> None:
    _create(client, "only")

    assert client.get("/todos", params={"page": 5}).json()["todos"] == []


def test_list_rejects_negative_limit(client: TestClient) -> None:
    resp = client.get("/todos", params={"limit": -1})

    assert resp.status_code == 400
    assert resp.json()["status"] == "fail"


def test_get_returns_single_todo(client: TestClient) -> None:
    todo = _create(client, "Buy milk", "2%")

    resp = client.get(f"/todos/{todo['id']}")

    assert resp.status_code == 200
    assert resp.json() == {"status": "success", "data": {"todo": todo}}


def test_get_unknown_id_is_404(client: TestClient) -> None:
    resp = client.get(f"/todos/{uuid.uuid4()}")

    assert resp.status_code == 404
    assert resp.json()["status"] == "fail"


def test_malformed_id_is_bad_request(client: TestClient) -> None:
    for method in ("get", "delete"):
        resp = getattr(client, method)("/todos/not-a-uuid")
        assert resp.status_code == 400
        assert resp.json()["status"] == "fail"

    resp = client.patch("/todos/not-a-uuid", json={"completed": True})
    assert resp.status_code == 400


def test_create_without_title_is_bad_request(client: TestClient) -> None:
    resp = client.post("/todos", json={"content": "no title"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == "fail"
    assert "title" in body["message"]


def test_patch_empty_strings_keep_existing_values(client: TestClient) -> None:
    todo = _create(client, "Buy milk", "2%")

    resp = client.patch(f"/todos/{todo['id']}", json={"title": "", "content": ""})

    updated = resp.json()["data"]["todo"]
    assert updated["title"] == "Buy milk"
    assert updated["content"] == "2%"


def test_patch_replaces_supplied_fields(client: TestClient) -> None:
    todo = _create(client, "Buy milk", "2%")

    resp = client.patch(f"/todos/{todo['id']}", json={"title": "Buy bread", "content": "rye"})

    updated = resp.json()["data"]["todo"]
    assert updated["id"] == todo["id"]
    assert updated["title"] == "Buy bread"
    assert updated["content"] == "rye"
    assert updated["completed"] is False


def test_patch_unknown_id_is_404(client: TestClient) -> None:
    resp = client.patch(f"/todos/{uuid.uuid4()}", json={"completed": True})

    assert resp.status_code == 404


def test_delete_unknown_id_is_404_and_keeps_others(client: TestClient) -> None:
    _create(client, "keep")

    resp = client.delete(f"/todos/{uuid.uuid4()}")

    assert resp.status_code == 404
    assert client.get("/todos").json()["results"] == 1


def test_apps_do_not_share_stores() -> None:
    first = TestClient(create_app(settings=Settings(), store=TodoStore()))
    second = TestClient(create_app(settings=Settings(), store=TodoStore()))

    _create(first, "Buy milk")

    assert second.get("/todos").json()["results"] == 0


def test_api_prefix_mounts_routes() -> None:
    client = TestClient(create_app(settings=Settings(api_prefix="/api")))

    assert client.get("/api/health").status_code == 200
    assert client.get("/api/todos").status_code == 200
    assert client.get("/todos").status_code == 404


def test_cors_allows_configured_origin(client: TestClient) -> None:
    resp = client.options(
        "/todos",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "PATCH",
        },
    )

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert resp.headers["access-control-allow-credentials"] == "true"

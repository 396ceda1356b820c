"""HTTP flows through the real app wired to an in-memory SQLite store."""

from datetime import UTC, datetime
from uuid import uuid4

from fastapi.testclient import TestClient


def _create(client: TestClient, **body) -> str:
    response = client.post("/tasks", json=body)
    assert response.status_code == 200
    return response.json()


def test_full_task_lifecycle(client: TestClient):
    task_id = _create(client, name="Buy milk")

    response = client.get("/tasks")
    assert response.status_code == 200
    assert response.json() == [
        {
            "id": task_id,
            "name": "Buy milk",
            "description": None,
            "dueDate": None,
            "isCompleted": False,
        }
    ]

    response = client.patch(f"/tasks/{task_id}", json={"isCompleted": True})
    assert response.status_code == 200

    listed = client.get("/tasks").json()
    assert listed == [
        {
            "id": task_id,
            "name": "Buy milk",
            "description": None,
            "dueDate": None,
            "isCompleted": True,
        }
    ]

    response = client.delete(f"/tasks/{task_id}")
    assert response.status_code == 204
    assert response.content == b""

    assert client.get("/tasks").json() == []


def test_create_keeps_optional_fields(client: TestClient):
    task_id = _create(
        client,
        name="File taxes",
        description="before the deadline",
        dueDate="2030-04-15T17:00:00",
    )

    (task,) = client.get("/tasks").json()
    assert task["id"] == task_id
    assert task["description"] == "before the deadline"
    assert task["dueDate"].startswith("2030-04-15T17:00:00")
    assert task["isCompleted"] is False


def test_identical_creates_produce_distinct_tasks(client: TestClient):
    first = _create(client, name="Water plants")
    second = _create(client, name="Water plants")

    assert first != second
    assert {t["id"] for t in client.get("/tasks").json()} == {first, second}


def test_create_without_name_is_bad_request(client: TestClient):
    response = client.post("/tasks", json={"description": "nameless"})

    assert response.status_code == 400
    assert response.json()["message"] == "Request validation failed."
    assert client.get("/tasks").json() == []


def test_create_with_blank_name_is_bad_request(client: TestClient):
    response = client.post("/tasks", json={"name": ""})
    assert response.status_code == 400


def test_update_unknown_task_is_not_found(client: TestClient):
    missing = str(uuid4())

    response = client.patch(f"/tasks/{missing}", json={"isCompleted": True})

    assert response.status_code == 404
    assert missing in response.json()["message"]


def test_update_with_invalid_body_is_bad_request(client: TestClient):
    task_id = _create(client, name="Call mom")

    assert client.patch(f"/tasks/{task_id}", json={}).status_code == 400
    assert client.patch(f"/tasks/{task_id}", json={"isCompleted": "maybe"}).status_code == 400
    assert client.get("/tasks").json()[0]["isCompleted"] is False


def test_update_with_malformed_id_is_bad_request(client: TestClient):
    response = client.patch("/tasks/not-a-uuid", json={"isCompleted": True})
    assert response.status_code == 400


def test_delete_unknown_task_is_not_found(client: TestClient):
    _create(client, name="Stay")
    missing = str(uuid4())

    response = client.delete(f"/tasks/{missing}")

    assert response.status_code == 404
    assert missing in response.json()["message"]
    assert len(client.get("/tasks").json()) == 1


def test_correlation_id_is_echoed(client: TestClient):
    response = client.get("/tasks", headers={"X-Correlation-ID": "corr-123"})
    assert response.headers["x-correlation-id"] == "corr-123"


def test_correlation_id_is_generated_when_absent(client: TestClient):
    response = client.get("/tasks")
    assert response.headers["x-correlation-id"]


def test_due_date_with_offset_keeps_its_instant(client: TestClient):
    _create(client, name="Call", dueDate="2030-04-15T17:00:00+02:00")

    (task,) = client.get("/tasks").json()
    listed = datetime.fromisoformat(task["dueDate"].replace("Z", "+00:00"))

    assert listed.utcoffset() is not None
    assert listed == datetime(2030, 4, 15, 15, 0, tzinfo=UTC)


def test_text_fields_are_returned_verbatim(client: TestClient):
    _create(client, name="  Call  ", description="  line\n")

    (task,) = client.get("/tasks").json()
    assert task["name"] == "  Call  "
    assert task["description"] == "  line\n"


def test_blank_name_with_spaces_is_bad_request(client: TestClient):
    response = client.post("/tasks", json={"name": "   "})
    assert response.status_code == 400

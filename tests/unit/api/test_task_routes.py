"""Unit tests for the task workflow API routes."""

from uuid import uuid4

from fastapi.testclient import TestClient

from printflow.bootstrap.workflow import WorkflowServices
from tests.helpers.api_payloads import (
    ARTWORK_ATTACHMENT,
    CREATE_BODY,
    DESIGN_HEADERS,
    MANAGER_HEADERS,
    SALES_HEADERS,
)


def _create(client: TestClient) -> dict:
    response = client.post("/v1/tasks", json=CREATE_BODY, headers=SALES_HEADERS)
    assert response.status_code == 201
    return response.json()


class TestCreateTask:
    """Tests for POST /v1/tasks."""

    def test_creates_task(self, client: TestClient, services: WorkflowServices) -> None:
        data = _create(client)

        assert data["status"] == "pending-design"
        assert data["created_by"] == "sales-1"
        assert data["specifications"]["finishes"] == ["Matte lamination"]
        assert data["notes"] == []
        assert data["attachments"] == []
        assert services.dispatcher.unread_count == 2

    def test_creates_task_with_attachments(self, client: TestClient) -> None:
        body = {**CREATE_BODY, "attachments": [ARTWORK_ATTACHMENT]}

        response = client.post("/v1/tasks", json=body, headers=SALES_HEADERS)

        assert response.status_code == 201
        [attachment] = response.json()["attachments"]
        assert attachment["file_name"] == "logo.pdf"
        assert attachment["uploaded_by"] == "sales-1"
        assert attachment["id"]
        fetched = client.get(f"/v1/tasks/{response.json()['id']}").json()
        assert fetched["attachments"] == [attachment]

    def test_requires_actor_headers(self, client: TestClient) -> None:
        response = client.post("/v1/tasks", json=CREATE_BODY)
        assert response.status_code == 401

    def test_unknown_role(self, client: TestClient) -> None:
        headers = {**SALES_HEADERS, "X-Actor-Role": "intern"}
        response = client.post("/v1/tasks", json=CREATE_BODY, headers=headers)
        assert response.status_code == 400

    def test_invalid_body(self, client: TestClient) -> None:
        body = {**CREATE_BODY, "specifications": {**CREATE_BODY["specifications"], "quantity": 0}}
        response = client.post("/v1/tasks", json=body, headers=SALES_HEADERS)
        assert response.status_code == 422

    def test_correlation_id_echoed(self, client: TestClient) -> None:
        response = client.post(
            "/v1/tasks",
            json=CREATE_BODY,
            headers={**SALES_HEADERS, "X-Correlation-ID": "req-42"},
        )
        assert response.headers["X-Correlation-ID"] == "req-42"


class TestReadTasks:
    """Tests for GET /v1/tasks and GET /v1/tasks/{id}."""

    def test_list_and_filter(self, client: TestClient) -> None:
        created = _create(client)

        listing = client.get("/v1/tasks").json()
        assert listing["total"] == 1
        assert listing["items"][0]["id"] == created["id"]

        assert client.get("/v1/tasks", params={"status": "approved"}).json()["total"] == 0
        assert client.get("/v1/tasks", params={"search": "acme"}).json()["total"] == 1

    def test_get_task(self, client: TestClient) -> None:
        created = _create(client)
        response = client.get(f"/v1/tasks/{created['id']}")
        assert response.status_code == 200
        assert response.json()["title"] == CREATE_BODY["title"]

    def test_get_missing_task(self, client: TestClient) -> None:
        response = client.get(f"/v1/tasks/{uuid4()}")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("application/problem+json")
        problem = response.json()
        assert problem["status"] == 404
        assert problem["type"].endswith("/task-not-found")


class TestStatusChange:
    """Tests for POST /v1/tasks/{id}/status."""

    def test_accepted(self, client: TestClient) -> None:
        created = _create(client)

        response = client.post(
            f"/v1/tasks/{created['id']}/status",
            json={"status": "in-design"},
            headers=DESIGN_HEADERS,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["previous_status"] == "pending-design"
        assert data["new_status"] == "in-design"
        assert data["task"]["status"] == "in-design"
        assert data["note"]["kind"] == "status-change"
        assert sorted(data["notified_recipients"]) == ["design-1", "design-2"]

    def test_forbidden(self, client: TestClient) -> None:
        created = _create(client)

        response = client.post(
            f"/v1/tasks/{created['id']}/status",
            json={"status": "in-design"},
            headers=MANAGER_HEADERS,
        )

        assert response.status_code == 403
        assert response.json()["type"].endswith("/transition-forbidden")
        assert client.get(f"/v1/tasks/{created['id']}").json()["status"] == "pending-design"

    def test_missing_task(self, client: TestClient) -> None:
        response = client.post(
            f"/v1/tasks/{uuid4()}/status",
            json={"status": "in-design"},
            headers=DESIGN_HEADERS,
        )
        assert response.status_code == 404

    def test_unknown_status_value(self, client: TestClient) -> None:
        created = _create(client)
        response = client.post(
            f"/v1/tasks/{created['id']}/status",
            json={"status": "shipped"},
            headers=DESIGN_HEADERS,
        )
        assert response.status_code == 422


class TestEditCommentDelete:
    """Tests for PATCH, comments and DELETE."""

    def test_patch(self, client: TestClient) -> None:
        created = _create(client)

        response = client.patch(
            f"/v1/tasks/{created['id']}",
            json={"priority": "urgent", "due_date": None},
            headers=SALES_HEADERS,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["priority"] == "urgent"
        assert data["due_date"] is None
        assert data["title"] == CREATE_BODY["title"]
        assert data["status"] == "pending-design"

    def test_patch_blank_title_rejected(self, client: TestClient) -> None:
        created = _create(client)

        response = client.patch(
            f"/v1/tasks/{created['id']}", json={"title": "   "}, headers=SALES_HEADERS
        )

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/problem+json")
        assert client.get(f"/v1/tasks/{created['id']}").json()["title"] == CREATE_BODY["title"]

    def test_patch_title_is_stripped(self, client: TestClient) -> None:
        created = _create(client)

        response = client.patch(
            f"/v1/tasks/{created['id']}", json={"title": "  Flyers  "}, headers=SALES_HEADERS
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Flyers"

    def test_patch_attachments(self, client: TestClient) -> None:
        created = _create(client)

        response = client.patch(
            f"/v1/tasks/{created['id']}",
            json={"attachments": [ARTWORK_ATTACHMENT]},
            headers=DESIGN_HEADERS,
        )

        assert response.status_code == 200
        assert [a["url"] for a in response.json()["attachments"]] == [ARTWORK_ATTACHMENT["url"]]

    def test_patch_missing_task(self, client: TestClient) -> None:
        response = client.patch(
            f"/v1/tasks/{uuid4()}", json={"priority": "low"}, headers=SALES_HEADERS
        )
        assert response.status_code == 404

    def test_comment(self, client: TestClient, services: WorkflowServices) -> None:
        created = _create(client)
        unread = services.dispatcher.unread_count

        response = client.post(
            f"/v1/tasks/{created['id']}/comments",
            json={"message": "Client prefers matte"},
            headers=DESIGN_HEADERS,
        )

        assert response.status_code == 201
        assert response.json()["kind"] == "comment"
        notes = client.get(f"/v1/tasks/{created['id']}").json()["notes"]
        assert [n["message"] for n in notes] == ["Client prefers matte"]
        assert services.dispatcher.unread_count == unread

    def test_blank_comment(self, client: TestClient) -> None:
        created = _create(client)
        response = client.post(
            f"/v1/tasks/{created['id']}/comments",
            json={"message": "   "},
            headers=DESIGN_HEADERS,
        )
        assert response.status_code == 400

    def test_delete(self, client: TestClient) -> None:
        created = _create(client)

        response = client.delete(f"/v1/tasks/{created['id']}", headers=SALES_HEADERS)

        assert response.status_code == 204
        assert client.get(f"/v1/tasks/{created['id']}").status_code == 404
        assert client.delete(f"/v1/tasks/{created['id']}", headers=SALES_HEADERS).status_code == 404


class TestNextStatuses:
    """Tests for GET /v1/workflow/next-statuses."""

    def test_manager_on_pending_approval(self, client: TestClient) -> None:
        response = client.get(
            "/v1/workflow/next-statuses",
            params={"status": "pending-approval", "role": "manager"},
        )
        assert response.status_code == 200
        assert sorted(response.json()["next_statuses"]) == ["approved", "design-review"]

    def test_terminal(self, client: TestClient) -> None:
        response = client.get(
            "/v1/workflow/next-statuses",
            params={"status": "delivered", "role": "sales-manager"},
        )
        assert response.json()["next_statuses"] == []

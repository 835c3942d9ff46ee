from fastapi.testclient import TestClient
import pytest

from app.api.http_app import build_app
from app.repositories.stub import InMemoryContactRepository
from app.services.bootstrap import build_runtime_container
from app.settings import ContactSettings


def _client(fail_with: Exception | None = None) -> tuple[TestClient, InMemoryContactRepository]:
    container = build_runtime_container(ContactSettings())
    assert isinstance(container.repository, InMemoryContactRepository)
    container.repository.fail_with = fail_with
    app = build_app(
        role="api",
        run_id="integration-api",
        api_deps=container.api_deps,
        storage_mode=container.storage_mode,
    )
    return TestClient(app), container.repository


@pytest.mark.integration
def test_system_endpoints_are_available() -> None:
    client, _ = _client()
    with client:
        health = client.get("/health")
        ready = client.get("/ready")

    assert health.status_code == 200
    assert health.json() == {"status": "ok", "role": "api", "mode": "contact"}
    assert ready.status_code == 200
    assert ready.json() == {"status": "ready", "role": "api", "storage": "memory"}


@pytest.mark.integration
def test_contact_submission_round_trip() -> None:
    client, repository = _client()
    with client:
        response = client.post(
            "/contact",
            json={"name": "  John Doe  ", "email": "  JOHN@EXAMPLE.COM  ", "message": "  Hi  "},
        )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["content-type"].startswith("application/json")
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Contact form submitted successfully"
    stored = repository.items[body["id"]]
    assert (stored["name"], stored["email"], stored["message"]) == ("John Doe", "john@example.com", "Hi")


@pytest.mark.integration
def test_preflight_request_returns_cors_headers() -> None:
    client, repository = _client()
    with client:
        response = client.options(
            "/contact",
            headers={"Origin": "https://site.example", "Access-Control-Request-Method": "POST"},
        )

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-headers"] == "Content-Type"
    assert response.headers["access-control-allow-methods"] == "OPTIONS,POST,GET"
    assert repository.writes == []


@pytest.mark.integration
@pytest.mark.parametrize(
    ("kwargs", "status_code", "message"),
    [
        ({"content": "invalid json"}, 400, "Invalid JSON in request body"),
        ({"json": {"name": "John Doe"}}, 400, "Missing required fields: name, email, and message are required"),
        (
            {"json": {"name": "John Doe", "email": "invalid-email", "message": "Test message"}},
            400,
            "Invalid email format",
        ),
    ],
)
def test_rejected_submissions(kwargs: dict[str, object], status_code: int, message: str) -> None:
    client, repository = _client()
    with client:
        response = client.post("/contact", **kwargs)

    assert response.status_code == status_code
    assert response.json() == {"success": False, "message": message}
    assert response.headers["access-control-allow-origin"] == "*"
    assert repository.writes == []


@pytest.mark.integration
def test_get_is_not_allowed() -> None:
    client, repository = _client()
    with client:
        response = client.get("/contact")

    assert response.status_code == 405
    assert response.json() == {"success": False, "message": "Method not allowed"}
    assert repository.writes == []


@pytest.mark.integration
def test_storage_failure_is_opaque() -> None:
    client, repository = _client(fail_with=RuntimeError("DynamoDB error"))
    with client:
        response = client.post(
            "/contact",
            json={"name": "John Doe", "email": "john@example.com", "message": "Test message"},
        )

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error"}
    assert "DynamoDB" not in response.text
    assert len(repository.writes) == 1


@pytest.mark.integration
@pytest.mark.parametrize("method", ["TRACE", "PROPFIND", "PUT", "DELETE"])
def test_unlisted_methods_get_handler_405(method: str) -> None:
    client, repository = _client()
    with client:
        response = client.request(method, "/contact")

    assert response.status_code == 405
    assert response.json() == {"success": False, "message": "Method not allowed"}
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-headers"] == "Content-Type"
    assert response.headers["access-control-allow-methods"] == "OPTIONS,POST,GET"
    assert repository.writes == []


@pytest.mark.integration
def test_head_gets_handler_405_with_cors_headers() -> None:
    client, repository = _client()
    with client:
        response = client.head("/contact")

    assert response.status_code == 405
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "OPTIONS,POST,GET"
    assert "allow" not in response.headers
    assert repository.writes == []


@pytest.mark.integration
def test_contact_post_is_documented_in_openapi() -> None:
    client, _ = _client()
    with client:
        schema = client.get("/openapi.json").json()

    assert "post" in schema["paths"]["/contact"]

"""Tests for admin endpoints."""

from datetime import UTC, datetime

from fastapi.testclient import TestClient

from portfolio_backend.api.app import create_app
from portfolio_backend.containers import AppContainer
from tests.conftest import InMemoryEmailRequestRepository

HEADERS = {"X-Admin-Token": "admin-token"}


def test_admin_health_requires_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/health")

    assert response.status_code == 401


def test_admin_health_accepts_valid_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/health", headers=HEADERS)

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_admin_lists_and_clears_email_requests(
    container: AppContainer,
    email_request_repository: InMemoryEmailRequestRepository,
) -> None:
    email_request_repository.create_request(
        "grace@example.com", datetime(2024, 5, 1, tzinfo=UTC)
    )
    client = TestClient(create_app(container))

    listed = client.get("/admin/email-requests", headers=HEADERS)
    cleared = client.delete("/admin/email-requests", headers=HEADERS)

    assert listed.json() == {
        "emailRequests": [
            {
                "id": 1,
                "email": "grace@example.com",
                "createdAt": "2024-05-01T00:00:00+00:00",
            }
        ]
    }
    assert cleared.json() == {"deleted": 1}
    assert email_request_repository.requests == []


def test_admin_clear_requires_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.delete("/admin/email-requests", headers={"X-Admin-Token": "x"})

    assert response.status_code == 401

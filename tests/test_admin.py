"""Tests for admin authentication and account endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from chicken_tracker.api.app import create_app
from chicken_tracker.containers import AppContainer

ADMIN_HEADERS = {"X-Admin-Token": "admin-token"}


def test_admin_health_requires_token(container: AppContainer) -> None:
    app = create_app(container)
    client = TestClient(app)

    response = client.get("/admin/health")

    assert response.status_code == 401


def test_admin_health_rejects_wrong_token(container: AppContainer) -> None:
    app = create_app(container)
    client = TestClient(app)

    response = client.get("/admin/health", headers={"X-Admin-Token": "nope"})

    assert response.status_code == 401


def test_admin_health_accepts_valid_token(container: AppContainer) -> None:
    app = create_app(container)
    client = TestClient(app)

    response = client.get("/admin/health", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_admin_users_endpoint(container: AppContainer, alice, bob) -> None:
    app = create_app(container)
    client = TestClient(app)

    response = client.get("/admin/users", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert [user["email"] for user in data["users"]] == [
        "alice@example.com",
        "bob@example.com",
    ]


def test_admin_delete_user_removes_owned_records(
    container: AppContainer, database, alice
) -> None:
    container.egg_production_service.create(alice.id, "2025-10-01", 4)
    app = create_app(container)
    client = TestClient(app)

    response = client.delete(f"/admin/users/{alice.id}", headers=ADMIN_HEADERS)

    assert response.status_code == 204
    assert database.users == {}
    assert database.egg_production == {}


def test_admin_delete_unknown_user(container: AppContainer) -> None:
    app = create_app(container)
    client = TestClient(app)

    response = client.delete(f"/admin/users/{uuid4()}", headers=ADMIN_HEADERS)

    assert response.status_code == 404
    assert response.json() == {"error": "User not found."}


def test_service_health(container: AppContainer) -> None:
    app = create_app(container)
    client = TestClient(app)

    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "chicken-tracker"

"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from cookmeet.presentation.api.app import create_app
from cookmeet.presentation.api.csrf import HEADER_NAME
from cookmeet.presentation.api.dependencies import get_password_service
from cookmeet_auth import PasswordHashingService

TEST_PASSWORD = "secret-pass"  # NOQA: S105


@pytest.fixture
def app(test_settings):
    app = create_app(settings=test_settings)
    # Cheap bcrypt work factor keeps the suite fast
    app.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        rounds=4,
    )
    return app


@pytest.fixture
def test_client(app):
    """Client with the lifespan running, so the schema exists."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def csrf_headers(test_client) -> dict:
    """Fetch a CSRF token; the client keeps the matching cookie."""
    response = test_client.get("/csrf")
    assert response.status_code == 200
    return {HEADER_NAME: response.json()["csrf_token"]}


@pytest.fixture
def registered_user_data() -> dict:
    return {
        "name": "Hanako",
        "email": "hanako@example.com",
        "password": TEST_PASSWORD,
    }


@pytest.fixture
def login_as(test_client, csrf_headers):
    """Sign up and log in a user; the client then holds their cookie."""

    def _login(user: dict) -> None:
        response = test_client.post("/signup", json=user, headers=csrf_headers)
        assert response.status_code == 201
        response = test_client.post(
            "/login",
            json={"email": user["email"], "password": user["password"]},
            headers=csrf_headers,
        )
        assert response.status_code == 200

    return _login


@pytest.fixture
def logged_in_client(test_client, login_as, registered_user_data) -> TestClient:
    """Client holding a valid ``token`` cookie."""
    login_as(registered_user_data)
    return test_client

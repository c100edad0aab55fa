"""Tests for auth endpoints and the session cookie."""

import pytest

from workbench.api.deps.dependencies import get_auth_service
from workbench.configs import get_settings
from workbench.core.exceptions import AuthenticationError, UsernameTakenError


@pytest.fixture
def auth_client(client, mock_service, current_user):
    mock_service.register.return_value = current_user
    mock_service.authenticate.return_value = current_user
    mock_service.get_user.return_value = current_user
    client.app.dependency_overrides[get_auth_service] = lambda: mock_service
    yield client
    client.app.dependency_overrides.clear()


def test_register_sets_session_cookie(auth_client, mock_service, current_user):
    response = auth_client.post(
        "/api/v1/auth/register", json={"username": "ada", "password": "long-enough"}
    )

    assert response.status_code == 201
    assert response.json()["id"] == str(current_user.id)
    assert get_settings().auth.cookie_name in response.cookies
    mock_service.register.assert_awaited_once_with("ada", "long-enough")


def test_register_taken_username(auth_client, mock_service):
    mock_service.register.side_effect = UsernameTakenError("ada")

    response = auth_client.post(
        "/api/v1/auth/register", json={"username": "ada", "password": "long-enough"}
    )

    assert response.status_code == 409


def test_register_validates_password_length(auth_client):
    response = auth_client.post(
        "/api/v1/auth/register", json={"username": "ada", "password": "short"}
    )

    assert response.status_code == 422


def test_login_bad_credentials(auth_client, mock_service):
    mock_service.authenticate.side_effect = AuthenticationError("Invalid username or password")

    response = auth_client.post(
        "/api/v1/auth/login", json={"username": "ada", "password": "wrong-password"}
    )

    assert response.status_code == 401


def test_me_requires_cookie(auth_client):
    assert auth_client.get("/api/v1/auth/me").status_code == 401


def test_me_rejects_tampered_cookie(auth_client):
    auth_client.cookies.set(get_settings().auth.cookie_name, "forged.token.value")

    assert auth_client.get("/api/v1/auth/me").status_code == 401


def test_login_then_me(auth_client, current_user):
    login = auth_client.post(
        "/api/v1/auth/login", json={"username": "ada", "password": "long-enough"}
    )
    assert login.status_code == 200

    me = auth_client.get("/api/v1/auth/me")

    assert me.status_code == 200
    assert me.json()["username"] == current_user.username


def test_me_for_deleted_account(auth_client, mock_service):
    auth_client.post("/api/v1/auth/login", json={"username": "ada", "password": "long-enough"})
    mock_service.get_user.side_effect = AuthenticationError("Session user no longer exists")

    assert auth_client.get("/api/v1/auth/me").status_code == 401


def test_logout_clears_cookie(auth_client):
    auth_client.post("/api/v1/auth/login", json={"username": "ada", "password": "long-enough"})

    response = auth_client.post("/api/v1/auth/logout")

    assert response.status_code == 204
    assert auth_client.get("/api/v1/auth/me").status_code == 401

"""
API test fixtures.

Builds the app with authentication and services replaced by mocks so
endpoint tests never touch a database or an LLM.
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from workbench.api.deps.dependencies import get_current_user
from workbench.api.main import create_app
from workbench.models.auth import UserResponse


@pytest.fixture
def current_user() -> UserResponse:
    return UserResponse(
        id=uuid.uuid4(), username="ada", created_at=datetime.now(timezone.utc)
    )


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


@pytest.fixture
def authed_client(client, current_user):
    client.app.dependency_overrides[get_current_user] = lambda: current_user
    yield client
    client.app.dependency_overrides.clear()


@pytest.fixture
def mock_service():
    return AsyncMock()

"""Tests for reminder endpoints."""

import uuid
from datetime import datetime, timezone

import pytest

from workbench.api.deps.dependencies import get_reminder_service
from workbench.core.exceptions import ReminderNotFoundError
from workbench.models.reminder import ReminderResponse


def _reminder(user_id, title="Revise") -> ReminderResponse:
    now = datetime.now(timezone.utc)
    return ReminderResponse(
        id=uuid.uuid4(),
        user_id=user_id,
        workspace_id=None,
        title=title,
        description=None,
        reminder_date=now,
        completed=False,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def reminder_client(authed_client, mock_service):
    authed_client.app.dependency_overrides[get_reminder_service] = lambda: mock_service
    return authed_client


def test_list_reminders(reminder_client, mock_service, current_user):
    mock_service.list_reminders.return_value = [_reminder(current_user.id)]

    response = reminder_client.get("/api/v1/reminders")

    assert response.status_code == 200
    assert response.json()[0]["title"] == "Revise"


def test_create_reminder(reminder_client, mock_service, current_user):
    mock_service.create_reminder.return_value = _reminder(current_user.id, "Exam")

    response = reminder_client.post(
        "/api/v1/reminders",
        json={"title": "Exam", "reminder_date": "2026-11-01T09:00:00Z"},
    )

    assert response.status_code == 201
    user_id, request = mock_service.create_reminder.call_args.args
    assert user_id == current_user.id
    assert request.title == "Exam"


def test_create_reminder_requires_date(reminder_client):
    response = reminder_client.post("/api/v1/reminders", json={"title": "Exam"})

    assert response.status_code == 422


def test_update_missing_reminder(reminder_client, mock_service):
    reminder_id = uuid.uuid4()
    mock_service.update_reminder.side_effect = ReminderNotFoundError(str(reminder_id))

    response = reminder_client.patch(
        f"/api/v1/reminders/{reminder_id}", json={"completed": True}
    )

    assert response.status_code == 404


def test_delete_reminder(reminder_client, mock_service, current_user):
    reminder_id = uuid.uuid4()

    response = reminder_client.delete(f"/api/v1/reminders/{reminder_id}")

    assert response.status_code == 204
    mock_service.delete_reminder.assert_awaited_once_with(current_user.id, reminder_id)

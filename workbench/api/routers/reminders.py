"""
Reminder API endpoints.

Routes:
- GET /reminders - List reminders
- POST /reminders - Create reminder
- PATCH /reminders/{id} - Update reminder
- DELETE /reminders/{id} - Delete reminder

Dependencies: workbench.application.services, workbench.models
System role: Reminder HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from workbench.api.deps.dependencies import get_current_user, get_reminder_service
from workbench.api.routers.router_utils import handle_service_errors
from workbench.application.services import ReminderService
from workbench.models.auth import UserResponse
from workbench.models.reminder import (
    CreateReminderRequest,
    ReminderResponse,
    UpdateReminderRequest,
)

router = APIRouter(prefix="/reminders", tags=["reminders"])


@router.get("", response_model=list[ReminderResponse])
@handle_service_errors
async def list_reminders(
    user: UserResponse = Depends(get_current_user),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> list[ReminderResponse]:
    """List reminders, soonest first."""
    return await reminder_service.list_reminders(user.id)


@router.post("", response_model=ReminderResponse, status_code=201)
@handle_service_errors
async def create_reminder(
    request: CreateReminderRequest,
    user: UserResponse = Depends(get_current_user),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> ReminderResponse:
    """
    Create a reminder.

    Raises:
        HTTPException(404): Linked workspace not found
    """
    return await reminder_service.create_reminder(user.id, request)


@router.patch("/{reminder_id}", response_model=ReminderResponse)
@handle_service_errors
async def update_reminder(
    reminder_id: UUID,
    request: UpdateReminderRequest,
    user: UserResponse = Depends(get_current_user),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> ReminderResponse:
    """
    Update a reminder.

    Raises:
        HTTPException(404): Reminder not found
    """
    return await reminder_service.update_reminder(user.id, reminder_id, request)


@router.delete("/{reminder_id}", status_code=204)
@handle_service_errors
async def delete_reminder(
    reminder_id: UUID,
    user: UserResponse = Depends(get_current_user),
    reminder_service: ReminderService = Depends(get_reminder_service),
) -> Response:
    """
    Delete a reminder.

    Raises:
        HTTPException(404): Reminder not found
    """
    await reminder_service.delete_reminder(user.id, reminder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

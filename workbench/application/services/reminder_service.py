"""
Reminder service.

Dependencies: workbench.boundary.db.CRUD, workbench.models
System role: Reminder use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from workbench.application.services.workspace_service import require_workspace
from workbench.boundary.db.CRUD.reminder_crud import reminder_crud
from workbench.core.exceptions import ReminderNotFoundError
from workbench.models.reminder import (
    CreateReminderRequest,
    ReminderResponse,
    UpdateReminderRequest,
)

logger = logging.getLogger(__name__)


class ReminderService:
    """User reminders, optionally linked to a workspace."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_reminders(self, user_id: UUID) -> list[ReminderResponse]:
        """List the user's reminders, soonest first."""
        reminders = await reminder_crud.get_by_user_id(self.db, user_id)
        return [ReminderResponse.model_validate(r) for r in reminders]

    async def create_reminder(
        self,
        user_id: UUID,
        request: CreateReminderRequest,
    ) -> ReminderResponse:
        """
        Create a reminder.

        Raises:
            WorkspaceNotFoundError: If workspace_id is given and not the user's
        """
        if request.workspace_id is not None:
            await require_workspace(self.db, request.workspace_id, user_id)

        reminder = await reminder_crud.create(
            self.db,
            user_id=user_id,
            workspace_id=request.workspace_id,
            title=request.title,
            description=request.description,
            reminder_date=request.reminder_date,
        )
        logger.info("Reminder created", extra={"reminder_id": str(reminder.id)})
        return ReminderResponse.model_validate(reminder)

    async def update_reminder(
        self,
        user_id: UUID,
        reminder_id: UUID,
        request: UpdateReminderRequest,
    ) -> ReminderResponse:
        """
        Apply the fields present in the request.

        Raises:
            ReminderNotFoundError: If the reminder is missing or not the user's
        """
        reminder = await reminder_crud.get_owned(self.db, reminder_id, user_id)
        if reminder is None:
            raise ReminderNotFoundError(str(reminder_id))

        # Only description may be cleared; null for the other fields means "unchanged".
        changes: dict[str, Any] = {
            field: value
            for field, value in request.model_dump(exclude_unset=True).items()
            if value is not None or field == "description"
        }
        if changes:
            reminder = await reminder_crud.update(self.db, reminder, **changes)
        return ReminderResponse.model_validate(reminder)

    async def delete_reminder(self, user_id: UUID, reminder_id: UUID) -> None:
        """
        Delete a reminder.

        Raises:
            ReminderNotFoundError: If the reminder is missing or not the user's
        """
        reminder = await reminder_crud.get_owned(self.db, reminder_id, user_id)
        if reminder is None:
            raise ReminderNotFoundError(str(reminder_id))
        await reminder_crud.delete(self.db, reminder)
        logger.info("Reminder deleted", extra={"reminder_id": str(reminder_id)})

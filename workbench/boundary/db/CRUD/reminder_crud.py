"""
Reminder CRUD operations.

Dependencies: sqlalchemy, workbench.boundary.db.models
System role: Reminder persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import asc, select
from sqlalchemy.ext.asyncio import AsyncSession

from workbench.boundary.db.models.reminder_model import ReminderModel
from workbench.boundary.db.CRUD.base_crud import BaseCRUD


class ReminderCRUD(BaseCRUD[ReminderModel]):
    """CRUD operations for ReminderModel, scoped to an owner."""

    def __init__(self) -> None:
        """Initialize ReminderCRUD with ReminderModel."""
        super().__init__(ReminderModel)

    async def get_by_user_id(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> Sequence[ReminderModel]:
        """
        Retrieve a user's reminders, soonest first.

        Args:
            session: Async database session
            user_id: Owner UUID

        Returns:
            Sequence of ReminderModels ordered by reminder_date
        """
        return await self.get_many(
            session,
            ReminderModel.user_id == user_id,
            order_by=(asc(ReminderModel.reminder_date),),
        )

    async def get_owned(
        self,
        session: AsyncSession,
        reminder_id: UUID,
        user_id: UUID,
    ) -> ReminderModel | None:
        """
        Retrieve a reminder only if it belongs to the given user.

        Args:
            session: Async database session
            reminder_id: Reminder UUID
            user_id: Expected owner UUID

        Returns:
            ReminderModel if found and owned, None otherwise
        """
        stmt = select(ReminderModel).where(
            (ReminderModel.id == reminder_id) & (ReminderModel.user_id == user_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


reminder_crud = ReminderCRUD()

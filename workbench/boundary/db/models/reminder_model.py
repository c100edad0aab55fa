"""
Reminder ORM model.

Dependencies: sqlalchemy, workbench.boundary.db.base
System role: Reminder persistence
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workbench.boundary.db.base import Base, UUIDMixin, TimestampMixin


class ReminderModel(Base, UUIDMixin, TimestampMixin):
    """
    Reminder ORM model.

    Reminders belong to a user and may point at one of the user's
    workspaces. Deleting the workspace keeps the reminder (SET NULL).

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user (cascade delete)
        workspace_id: Optional related workspace (set null on delete)
        title: Short reminder title
        description: Optional longer text
        reminder_date: When the reminder is due (UTC)
        completed: Whether the user ticked it off
    """

    __tablename__ = "reminders"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    workspace_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("workspaces.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    reminder_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    user = relationship("UserModel", back_populates="reminders")

"""
User ORM model.

Represents an account that owns workspaces and reminders.

Dependencies: sqlalchemy, workbench.boundary.db.base
System role: User persistence for authentication
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workbench.boundary.db.base import Base, UUIDMixin, TimestampMixin


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        username: Unique login name
        password_hash: bcrypt hash of the password (never the password itself)
        workspaces: Workspaces owned by this user (cascading delete)
        reminders: Reminders owned by this user (cascading delete)
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        doc="Unique login name",
    )

    password_hash: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        doc="bcrypt password hash",
    )

    # Relationships
    workspaces = relationship(
        "WorkspaceModel",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    reminders = relationship(
        "ReminderModel",
        back_populates="user",
        cascade="all, delete-orphan",
    )

"""
Message ORM model.

Represents one chat turn in a workspace panel.

Dependencies: sqlalchemy, workbench.boundary.db.base
System role: Panel conversation persistence
"""

import enum
import uuid

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workbench.boundary.db.base import Base, UUIDMixin, TimestampMixin


class PanelType(str, enum.Enum):
    """Workspace panels."""

    CODER = "coder"
    ARTIST = "artist"
    TUTOR = "tutor"


class MessageRole(str, enum.Enum):
    """Author of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class MessageModel(Base, UUIDMixin, TimestampMixin):
    """
    Message ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        workspace_id: Parent workspace (cascade delete)
        panel_type: Panel the message belongs to (coder, artist, tutor)
        role: Message author (user, assistant)
        content: Message text
        created_at: Message timestamp (UTC), defines conversation order
    """

    __tablename__ = "messages"

    workspace_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Workspace this message belongs to",
    )

    panel_type: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        doc="Panel name (coder, artist, tutor)",
    )

    role: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        doc="Message role (user, assistant)",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Message text",
    )

    # Relationships
    workspace = relationship("WorkspaceModel", back_populates="messages")

"""
Workspace ORM model.

Represents a user's workspace holding the Coder, Artist and Tutor panels.
Messages and diagrams are scoped to a workspace.

Dependencies: sqlalchemy, workbench.boundary.db.base
System role: Workspace persistence for panel history isolation
"""

import uuid

from sqlalchemy import JSON, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workbench.boundary.db.base import Base, UUIDMixin, TimestampMixin


def default_panel_states() -> dict[str, bool]:
    """All panels visible."""
    return {"coder": True, "artist": True, "tutor": True}


class WorkspaceModel(Base, UUIDMixin, TimestampMixin):
    """
    Workspace ORM model.

    Each workspace isolates one set of panel conversations and diagrams.
    Cascade delete ensures messages and diagrams are removed with it.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user (cascade delete)
        name: Display name
        panel_states: JSON map of panel name to visibility flag
        messages: Chat messages across all panels (cascading delete)
        diagrams: Generated diagrams (cascading delete)
        created_at: Workspace creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "workspaces"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="User who owns this workspace",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Workspace display name",
    )

    panel_states: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        default=default_panel_states,
        doc="Panel visibility flags",
    )

    # Relationships
    user = relationship("UserModel", back_populates="workspaces")
    messages = relationship(
        "MessageModel",
        back_populates="workspace",
        cascade="all, delete-orphan",
    )
    diagrams = relationship(
        "DiagramModel",
        back_populates="workspace",
        cascade="all, delete-orphan",
    )

"""
Diagram ORM model.

Represents a Mermaid diagram generated in a workspace's Artist panel.

Dependencies: sqlalchemy, workbench.boundary.db.base
System role: Diagram persistence
"""

import uuid

from sqlalchemy import ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workbench.boundary.db.base import Base, UUIDMixin, TimestampMixin


class DiagramModel(Base, UUIDMixin, TimestampMixin):
    """
    Diagram ORM model.

    mermaid_code holds sanitized diagram source and is never rewritten
    after creation.

    Attributes:
        id: UUID primary key (auto-generated)
        workspace_id: Parent workspace (cascade delete)
        prompt: User's natural-language description
        mermaid_code: Sanitized Mermaid source
        created_at: Generation timestamp (UTC)
    """

    __tablename__ = "diagrams"

    workspace_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Workspace this diagram belongs to",
    )

    prompt: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Diagram description the user submitted",
    )

    mermaid_code: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Sanitized Mermaid source",
    )

    # Relationships
    workspace = relationship("WorkspaceModel", back_populates="diagrams")

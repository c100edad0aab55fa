"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - UserModel, WorkspaceModel, MessageModel, DiagramModel, ReminderModel: Domain entities
  - PanelType, MessageRole: Enum types for messages
  - *_crud: CRUD operation singletons

Dependencies: sqlalchemy, workbench.configs
System role: Database adapter providing persistent storage for users,
workspaces, panel messages, diagrams and reminders.
"""

from workbench.boundary.db.base import Base, TimestampMixin, UUIDMixin
from workbench.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from workbench.boundary.db.models import (
    DiagramModel,
    MessageModel,
    MessageRole,
    PanelType,
    ReminderModel,
    UserModel,
    WorkspaceModel,
)
from workbench.boundary.db.CRUD import (
    BaseCRUD,
    diagram_crud,
    message_crud,
    reminder_crud,
    user_crud,
    workspace_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "UserModel",
    "WorkspaceModel",
    "MessageModel",
    "MessageRole",
    "PanelType",
    "DiagramModel",
    "ReminderModel",
    # CRUD
    "BaseCRUD",
    "user_crud",
    "workspace_crud",
    "message_crud",
    "diagram_crud",
    "reminder_crud",
]

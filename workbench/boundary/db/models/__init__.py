"""
Database models package.

Exports:
  - UserModel: Account ORM model
  - WorkspaceModel: Workspace ORM model
  - MessageModel, PanelType, MessageRole: Chat message ORM model and enums
  - DiagramModel: Diagram ORM model
  - ReminderModel: Reminder ORM model

Dependencies: sqlalchemy, workbench.boundary.db.base
System role: Database model definitions for domain entities
"""

from workbench.boundary.db.models.user_model import UserModel
from workbench.boundary.db.models.workspace_model import WorkspaceModel
from workbench.boundary.db.models.message_model import MessageModel, MessageRole, PanelType
from workbench.boundary.db.models.diagram_model import DiagramModel
from workbench.boundary.db.models.reminder_model import ReminderModel

__all__ = [
    "UserModel",
    "WorkspaceModel",
    "MessageModel",
    "MessageRole",
    "PanelType",
    "DiagramModel",
    "ReminderModel",
]

"""Application services."""

from workbench.application.services.auth_service import AuthService
from workbench.application.services.chat_service import ChatService
from workbench.application.services.diagram_service import DiagramService
from workbench.application.services.reminder_service import ReminderService
from workbench.application.services.workspace_service import WorkspaceService

__all__ = [
    "AuthService",
    "ChatService",
    "DiagramService",
    "ReminderService",
    "WorkspaceService",
]

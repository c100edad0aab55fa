"""API request/response schemas."""

from workbench.models.auth import CredentialsRequest, UserResponse
from workbench.models.chat import ChatExchangeResponse, ChatRequest
from workbench.models.common import ErrorResponse, HealthResponse
from workbench.models.diagram import DiagramRequest, DiagramResponse
from workbench.models.message import MessageResponse
from workbench.models.reminder import (
    CreateReminderRequest,
    ReminderResponse,
    UpdateReminderRequest,
)
from workbench.models.workspace import (
    CreateWorkspaceRequest,
    UpdateWorkspaceRequest,
    WorkspaceResponse,
)

__all__ = [
    "ChatExchangeResponse",
    "ChatRequest",
    "CreateReminderRequest",
    "CreateWorkspaceRequest",
    "CredentialsRequest",
    "DiagramRequest",
    "DiagramResponse",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "ReminderResponse",
    "UpdateReminderRequest",
    "UpdateWorkspaceRequest",
    "UserResponse",
    "WorkspaceResponse",
]

"""
Core business logic module.

Contains the diagram sanitizer, LLM access, prompts, security helpers
and the exception hierarchy.
"""

from workbench.core.exceptions import (
    AuthenticationError,
    DiagramNotFoundError,
    ReminderNotFoundError,
    ResourceNotFoundError,
    TextGenerationError,
    UsernameTakenError,
    ValidationError,
    WorkbenchException,
    WorkspaceNotFoundError,
)

__all__ = [
    "AuthenticationError",
    "DiagramNotFoundError",
    "ReminderNotFoundError",
    "ResourceNotFoundError",
    "TextGenerationError",
    "UsernameTakenError",
    "ValidationError",
    "WorkbenchException",
    "WorkspaceNotFoundError",
]

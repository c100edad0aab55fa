"""
Exception hierarchy for the Workbench application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class WorkbenchException(Exception):
    """Base exception for all Workbench application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(WorkbenchException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class AuthenticationError(WorkbenchException):
    """Raised when credentials or a session token are missing or invalid."""

    pass


class UsernameTakenError(WorkbenchException):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username already taken: {username}", {"username": username})


class ResourceNotFoundError(WorkbenchException):
    """Base class for missing records."""

    resource = "Resource"

    def __init__(self, resource_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize not found error.

        Args:
            resource_id: ID of the missing record
            details: Additional context
        """
        details = details or {}
        details["resource_id"] = resource_id
        self.resource_id = resource_id
        super().__init__(f"{self.resource} not found: {resource_id}", details)


class WorkspaceNotFoundError(ResourceNotFoundError):
    """Raised when a workspace does not exist or belongs to another user."""

    resource = "Workspace"


class DiagramNotFoundError(ResourceNotFoundError):
    """Raised when a diagram cannot be found."""

    resource = "Diagram"


class ReminderNotFoundError(ResourceNotFoundError):
    """Raised when a reminder does not exist or belongs to another user."""

    resource = "Reminder"


class TextGenerationError(WorkbenchException):
    """Raised when the upstream text-generation service fails."""

    def __init__(
        self,
        message: str,
        model_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize text generation error.

        Args:
            message: Error message
            model_id: Model that was called
            details: Additional context
        """
        details = details or {}
        if model_id:
            details["model_id"] = model_id
        super().__init__(message, details)

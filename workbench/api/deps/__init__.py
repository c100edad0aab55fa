"""FastAPI dependency providers."""

from workbench.api.deps.dependencies import (
    ServiceCache,
    get_auth_service,
    get_chat_service,
    get_current_user,
    get_diagram_service,
    get_reminder_service,
    get_service_cache,
    get_settings_dependency,
    get_token_signer,
    get_workspace_service,
)

__all__ = [
    "ServiceCache",
    "get_auth_service",
    "get_chat_service",
    "get_current_user",
    "get_diagram_service",
    "get_reminder_service",
    "get_service_cache",
    "get_settings_dependency",
    "get_token_signer",
    "get_workspace_service",
]

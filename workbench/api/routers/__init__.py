"""API routers."""

from .ai import router as ai_router
from .auth import router as auth_router
from .diagrams import router as diagrams_router
from .health import router as health_router
from .reminders import router as reminders_router
from .workspaces import router as workspaces_router

__all__ = [
    "ai_router",
    "auth_router",
    "diagrams_router",
    "health_router",
    "reminders_router",
    "workspaces_router",
]

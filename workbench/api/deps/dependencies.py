"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: workbench.configs, workbench.application, workbench.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from workbench.application.services import (
    AuthService,
    ChatService,
    DiagramService,
    ReminderService,
    WorkspaceService,
)
from workbench.boundary.db import get_async_db
from workbench.configs import Settings, get_settings
from workbench.core.exceptions import AuthenticationError
from workbench.core.llm import TextGenerator
from workbench.core.security import SessionTokenSigner
from workbench.models.auth import UserResponse


class ServiceCache:
    """Container for cached process-wide instances."""

    def __init__(self):
        self._chat_generator = None
        self._diagram_generator = None
        self._token_signer = None

    def _build_generator(self, temperature: float) -> TextGenerator:
        llm = get_settings().llm
        return TextGenerator(
            model_id=llm.model_id,
            temperature=temperature,
            api_key=llm.google_api_key,
            max_retries=llm.max_retries,
            timeout=llm.timeout_seconds,
        )

    @property
    def chat_generator(self) -> TextGenerator:
        """Get cached generator for the Coder and Tutor panels."""
        if self._chat_generator is None:
            self._chat_generator = self._build_generator(
                get_settings().llm.chat_temperature
            )
        return self._chat_generator

    @property
    def diagram_generator(self) -> TextGenerator:
        """Get cached generator for the Artist panel."""
        if self._diagram_generator is None:
            self._diagram_generator = self._build_generator(
                get_settings().llm.diagram_temperature
            )
        return self._diagram_generator

    @property
    def token_signer(self) -> SessionTokenSigner:
        """Get cached session token signer."""
        if self._token_signer is None:
            auth = get_settings().auth
            self._token_signer = SessionTokenSigner(
                secret=auth.session_secret,
                max_age=auth.session_max_age,
            )
        return self._token_signer

    def clear(self) -> None:
        """Clear all cached instances."""
        self._chat_generator = None
        self._diagram_generator = None
        self._token_signer = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_token_signer(
    cache: ServiceCache = Depends(get_service_cache),
) -> SessionTokenSigner:
    """Get the session token signer."""
    return cache.token_signer


def get_auth_service(db: AsyncSession = Depends(get_async_db)) -> AuthService:
    """
    Get auth service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        AuthService: Auth service instance
    """
    return AuthService(db=db)


async def get_current_user(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),
    signer: SessionTokenSigner = Depends(get_token_signer),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """
    Resolve the logged-in user from the session cookie.

    Raises:
        HTTPException(401): Missing, tampered, expired or orphaned session
    """
    token = request.cookies.get(settings.auth.cookie_name)
    user_id = signer.verify(token) if token else None
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        return await auth_service.get_user(user_id)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


def get_workspace_service(db: AsyncSession = Depends(get_async_db)) -> WorkspaceService:
    """
    Get workspace service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        WorkspaceService: Workspace service instance
    """
    return WorkspaceService(db=db)


def get_chat_service(
    db: AsyncSession = Depends(get_async_db),
    cache: ServiceCache = Depends(get_service_cache),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        db: Async database session (injected via Depends)
        cache: Service cache holding the shared chat generator

    Returns:
        ChatService: Chat service for the Coder and Tutor panels
    """
    return ChatService(db=db, generator=cache.chat_generator)


def get_diagram_service(
    db: AsyncSession = Depends(get_async_db),
    cache: ServiceCache = Depends(get_service_cache),
) -> DiagramService:
    """
    Get diagram service instance.

    Args:
        db: Async database session (injected via Depends)
        cache: Service cache holding the shared diagram generator

    Returns:
        DiagramService: Diagram service for the Artist panel
    """
    return DiagramService(db=db, generator=cache.diagram_generator)


def get_reminder_service(db: AsyncSession = Depends(get_async_db)) -> ReminderService:
    """Get reminder service instance."""
    return ReminderService(db=db)

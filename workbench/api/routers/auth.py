"""
Auth API endpoints.

Routes:
- POST /auth/register - Create account and start a session
- POST /auth/login - Start a session
- POST /auth/logout - End the session
- GET /auth/me - Current user

Dependencies: workbench.application.services, workbench.core.security
System role: Account HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from workbench.api.deps.dependencies import (
    get_auth_service,
    get_current_user,
    get_settings_dependency,
    get_token_signer,
)
from workbench.api.routers.router_utils import handle_service_errors
from workbench.application.services import AuthService
from workbench.configs import Settings
from workbench.core.security import SessionTokenSigner
from workbench.models.auth import CredentialsRequest, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _set_session_cookie(
    response: Response,
    user: UserResponse,
    settings: Settings,
    signer: SessionTokenSigner,
) -> None:
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=signer.issue(user.id),
        max_age=settings.auth.session_max_age,
        httponly=True,
        samesite="lax",
        secure=settings.auth.cookie_secure,
    )


@router.post("/register", response_model=UserResponse, status_code=201)
@handle_service_errors
async def register(
    request: CredentialsRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
    signer: SessionTokenSigner = Depends(get_token_signer),
) -> UserResponse:
    """
    Register a new account and log it in.

    Raises:
        HTTPException(409): Username already taken
    """
    user = await auth_service.register(request.username, request.password)
    _set_session_cookie(response, user, settings, signer)
    return user


@router.post("/login", response_model=UserResponse)
@handle_service_errors
async def login(
    request: CredentialsRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
    signer: SessionTokenSigner = Depends(get_token_signer),
) -> UserResponse:
    """
    Log in with username and password.

    Raises:
        HTTPException(401): Invalid credentials
    """
    user = await auth_service.authenticate(request.username, request.password)
    _set_session_cookie(response, user, settings, signer)
    return user


@router.post("/logout", status_code=204)
async def logout(settings: Settings = Depends(get_settings_dependency)) -> Response:
    """Clear the session cookie."""
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(settings.auth.cookie_name)
    return response


@router.get("/me", response_model=UserResponse)
async def me(user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """Return the logged-in user."""
    return user

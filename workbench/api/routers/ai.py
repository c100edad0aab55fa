"""
AI panel API endpoints.

Routes:
- POST /ai/coder - Coding assistant turn
- POST /ai/tutor - Tutor turn with Coder context
- POST /ai/artist - Generate a Mermaid diagram

Dependencies: workbench.application.services, workbench.models
System role: Panel generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from workbench.api.deps.dependencies import (
    get_chat_service,
    get_current_user,
    get_diagram_service,
)
from workbench.api.routers.router_utils import handle_service_errors
from workbench.application.services import ChatService, DiagramService
from workbench.models.auth import UserResponse
from workbench.models.chat import ChatExchangeResponse, ChatRequest
from workbench.models.diagram import DiagramRequest, DiagramResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/coder", response_model=ChatExchangeResponse)
@handle_service_errors
async def coder(
    request: ChatRequest,
    user: UserResponse = Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatExchangeResponse:
    """
    Send a message to the coding assistant.

    Raises:
        HTTPException(404): Workspace not found
        HTTPException(502): Generation failed
    """
    return await chat_service.send_coder_message(
        user.id, request.workspace_id, request.message
    )


@router.post("/tutor", response_model=ChatExchangeResponse)
@handle_service_errors
async def tutor(
    request: ChatRequest,
    user: UserResponse = Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatExchangeResponse:
    """
    Send a message to the tutor.

    Raises:
        HTTPException(404): Workspace not found
        HTTPException(502): Generation failed
    """
    return await chat_service.send_tutor_message(
        user.id, request.workspace_id, request.message
    )


@router.post("/artist", response_model=DiagramResponse, status_code=201)
@handle_service_errors
async def artist(
    request: DiagramRequest,
    user: UserResponse = Depends(get_current_user),
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> DiagramResponse:
    """
    Generate, sanitize and store a Mermaid diagram.

    Raises:
        HTTPException(404): Workspace not found
        HTTPException(502): Generation failed
    """
    logger.info(
        "Diagram requested",
        extra={"workspace_id": str(request.workspace_id), "has_context": bool(request.context)},
    )
    return await diagram_service.generate_diagram(
        user.id, request.workspace_id, request.prompt, request.context
    )

"""
Workspace API endpoints.

Routes:
- GET /workspaces - List the user's workspaces
- POST /workspaces - Create workspace
- PATCH /workspaces/{id} - Rename or toggle panels
- DELETE /workspaces/{id} - Delete workspace
- GET /workspaces/{id}/messages/{panel_type} - Panel history
- GET /workspaces/{id}/diagrams - Stored diagrams

Dependencies: workbench.application.services, workbench.models
System role: Workspace management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from workbench.api.deps.dependencies import (
    get_current_user,
    get_diagram_service,
    get_workspace_service,
)
from workbench.api.routers.router_utils import handle_service_errors
from workbench.application.services import DiagramService, WorkspaceService
from workbench.boundary.db.models.message_model import PanelType
from workbench.models.auth import UserResponse
from workbench.models.diagram import DiagramResponse
from workbench.models.message import MessageResponse
from workbench.models.workspace import (
    CreateWorkspaceRequest,
    UpdateWorkspaceRequest,
    WorkspaceResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workspaces", tags=["workspaces"])


@router.get("", response_model=list[WorkspaceResponse])
@handle_service_errors
async def list_workspaces(
    user: UserResponse = Depends(get_current_user),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
) -> list[WorkspaceResponse]:
    """List the user's workspaces, most recently updated first."""
    return await workspace_service.list_workspaces(user.id)


@router.post("", response_model=WorkspaceResponse, status_code=201)
@handle_service_errors
async def create_workspace(
    request: CreateWorkspaceRequest,
    user: UserResponse = Depends(get_current_user),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
) -> WorkspaceResponse:
    """
    Create a workspace.

    Raises:
        HTTPException(400): Unknown panel in panel_states
    """
    logger.info("Creating workspace", extra={"user_id": str(user.id)})
    return await workspace_service.create_workspace(
        user.id, request.name, request.panel_states
    )


@router.patch("/{workspace_id}", response_model=WorkspaceResponse)
@handle_service_errors
async def update_workspace(
    workspace_id: UUID,
    request: UpdateWorkspaceRequest,
    user: UserResponse = Depends(get_current_user),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
) -> WorkspaceResponse:
    """
    Rename a workspace or change panel visibility.

    Raises:
        HTTPException(404): Workspace not found
        HTTPException(400): Unknown panel in panel_states
    """
    return await workspace_service.update_workspace(
        user.id,
        workspace_id,
        name=request.name,
        panel_states=request.panel_states,
    )


@router.delete("/{workspace_id}", status_code=204)
@handle_service_errors
async def delete_workspace(
    workspace_id: UUID,
    user: UserResponse = Depends(get_current_user),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
) -> Response:
    """
    Delete a workspace and everything in it.

    Raises:
        HTTPException(404): Workspace not found
    """
    await workspace_service.delete_workspace(user.id, workspace_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{workspace_id}/messages/{panel_type}", response_model=list[MessageResponse])
@handle_service_errors
async def list_messages(
    workspace_id: UUID,
    panel_type: PanelType,
    user: UserResponse = Depends(get_current_user),
    workspace_service: WorkspaceService = Depends(get_workspace_service),
) -> list[MessageResponse]:
    """
    Return a panel's conversation, oldest first.

    Raises:
        HTTPException(404): Workspace not found
    """
    return await workspace_service.list_messages(user.id, workspace_id, panel_type)


@router.get("/{workspace_id}/diagrams", response_model=list[DiagramResponse])
@handle_service_errors
async def list_diagrams(
    workspace_id: UUID,
    limit: int | None = Query(default=None, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    user: UserResponse = Depends(get_current_user),
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> list[DiagramResponse]:
    """
    Return a workspace's diagrams, newest first.

    Raises:
        HTTPException(404): Workspace not found
    """
    return await diagram_service.list_diagrams(
        user.id, workspace_id, limit=limit, offset=offset
    )

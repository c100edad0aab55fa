"""
Diagram API endpoints.

Routes: DELETE /diagrams/{id}

Dependencies: workbench.application.services
System role: Diagram management HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from workbench.api.deps.dependencies import get_current_user, get_diagram_service
from workbench.api.routers.router_utils import handle_service_errors
from workbench.application.services import DiagramService
from workbench.models.auth import UserResponse

router = APIRouter(prefix="/diagrams", tags=["diagrams"])


@router.delete("/{diagram_id}", status_code=204)
@handle_service_errors
async def delete_diagram(
    diagram_id: UUID,
    user: UserResponse = Depends(get_current_user),
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> Response:
    """
    Delete a diagram.

    Raises:
        HTTPException(404): Diagram not found
    """
    await diagram_service.delete_diagram(user.id, diagram_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

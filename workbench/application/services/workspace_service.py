"""
Workspace service orchestrator.

Coordinates workspace lifecycle operations and panel history reads.
Every operation is scoped to the requesting user: a workspace owned by
someone else is reported as not found.

Dependencies: workbench.boundary.db.CRUD, workbench.models
System role: Workspace use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from workbench.boundary.db.CRUD.message_crud import message_crud
from workbench.boundary.db.CRUD.workspace_crud import workspace_crud
from workbench.boundary.db.models.message_model import PanelType
from workbench.boundary.db.models.workspace_model import (
    WorkspaceModel,
    default_panel_states,
)
from workbench.core.exceptions import ValidationError, WorkspaceNotFoundError
from workbench.models.message import MessageResponse
from workbench.models.workspace import WorkspaceResponse

logger = logging.getLogger(__name__)

PANEL_NAMES = frozenset(panel.value for panel in PanelType)


async def require_workspace(
    db: AsyncSession,
    workspace_id: UUID,
    user_id: UUID,
) -> WorkspaceModel:
    """
    Load a workspace owned by the user.

    Raises:
        WorkspaceNotFoundError: If it does not exist or belongs to another user
    """
    workspace = await workspace_crud.get_owned(db, workspace_id, user_id)
    if workspace is None:
        raise WorkspaceNotFoundError(str(workspace_id))
    return workspace


def _validate_panel_states(panel_states: dict[str, bool]) -> None:
    unknown = set(panel_states) - PANEL_NAMES
    if unknown:
        raise ValidationError(
            f"Unknown panels: {', '.join(sorted(unknown))}",
            field="panel_states",
        )


class WorkspaceService:
    """Workspace service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize workspace service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def list_workspaces(self, user_id: UUID) -> list[WorkspaceResponse]:
        """List the user's workspaces, most recently updated first."""
        workspaces = await workspace_crud.get_by_user_id(self.db, user_id)
        return [WorkspaceResponse.model_validate(w) for w in workspaces]

    async def create_workspace(
        self,
        user_id: UUID,
        name: str,
        panel_states: dict[str, bool] | None = None,
    ) -> WorkspaceResponse:
        """
        Create a workspace with all panels visible unless told otherwise.

        Args:
            user_id: Owner UUID
            name: Workspace name
            panel_states: Partial panel visibility overrides

        Returns:
            WorkspaceResponse: Created workspace

        Raises:
            ValidationError: If panel_states names an unknown panel
        """
        states = default_panel_states()
        if panel_states:
            _validate_panel_states(panel_states)
            states.update(panel_states)

        workspace = await workspace_crud.create(
            self.db,
            user_id=user_id,
            name=name,
            panel_states=states,
        )
        logger.info(
            "Workspace created",
            extra={"workspace_id": str(workspace.id), "user_id": str(user_id)},
        )
        return WorkspaceResponse.model_validate(workspace)

    async def update_workspace(
        self,
        user_id: UUID,
        workspace_id: UUID,
        name: str | None = None,
        panel_states: dict[str, bool] | None = None,
    ) -> WorkspaceResponse:
        """
        Rename a workspace and/or merge panel visibility changes.

        Raises:
            WorkspaceNotFoundError: If the workspace is not the user's
            ValidationError: If panel_states names an unknown panel
        """
        workspace = await require_workspace(self.db, workspace_id, user_id)

        changes: dict = {}
        if name is not None:
            changes["name"] = name
        if panel_states is not None:
            _validate_panel_states(panel_states)
            changes["panel_states"] = {**workspace.panel_states, **panel_states}

        if changes:
            workspace = await workspace_crud.update(self.db, workspace, **changes)
            logger.info(
                "Workspace updated",
                extra={"workspace_id": str(workspace_id), "fields": sorted(changes)},
            )
        return WorkspaceResponse.model_validate(workspace)

    async def delete_workspace(self, user_id: UUID, workspace_id: UUID) -> None:
        """
        Delete a workspace with its messages and diagrams.

        Raises:
            WorkspaceNotFoundError: If the workspace is not the user's
        """
        workspace = await require_workspace(self.db, workspace_id, user_id)
        await workspace_crud.delete(self.db, workspace)
        logger.info("Workspace deleted", extra={"workspace_id": str(workspace_id)})

    async def list_messages(
        self,
        user_id: UUID,
        workspace_id: UUID,
        panel_type: PanelType,
    ) -> list[MessageResponse]:
        """
        Return one panel's conversation, oldest first.

        Raises:
            WorkspaceNotFoundError: If the workspace is not the user's
        """
        await require_workspace(self.db, workspace_id, user_id)
        messages = await message_crud.get_by_workspace_and_panel(
            self.db, workspace_id, panel_type
        )
        return [MessageResponse.model_validate(m) for m in messages]

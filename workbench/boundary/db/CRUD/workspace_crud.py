"""
Workspace CRUD operations.

Provides Create, Read, Update, Delete operations for WorkspaceModel
with owner-scoped query methods.

Dependencies: sqlalchemy, workbench.boundary.db.models
System role: Workspace persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from workbench.boundary.db.models.workspace_model import WorkspaceModel
from workbench.boundary.db.CRUD.base_crud import BaseCRUD


class WorkspaceCRUD(BaseCRUD[WorkspaceModel]):
    """
    CRUD operations for WorkspaceModel.

    Extends BaseCRUD with lookups restricted to a single owner so one user
    can never read or modify another user's workspace.
    """

    def __init__(self) -> None:
        """Initialize WorkspaceCRUD with WorkspaceModel."""
        super().__init__(WorkspaceModel)

    async def get_by_user_id(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> Sequence[WorkspaceModel]:
        """
        Retrieve a user's workspaces, most recently updated first.

        Args:
            session: Async database session
            user_id: Owner UUID

        Returns:
            Sequence of WorkspaceModels
        """
        return await self.get_many(
            session,
            WorkspaceModel.user_id == user_id,
            order_by=(desc(WorkspaceModel.updated_at),),
        )

    async def get_owned(
        self,
        session: AsyncSession,
        workspace_id: UUID,
        user_id: UUID,
    ) -> WorkspaceModel | None:
        """
        Retrieve a workspace only if it belongs to the given user.

        Args:
            session: Async database session
            workspace_id: Workspace UUID
            user_id: Expected owner UUID

        Returns:
            WorkspaceModel if found and owned, None otherwise
        """
        stmt = select(WorkspaceModel).where(
            (WorkspaceModel.id == workspace_id) & (WorkspaceModel.user_id == user_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


workspace_crud = WorkspaceCRUD()

"""
Diagram CRUD operations.

Provides Create, Read, Delete operations for DiagramModel with
workspace filtering and newest-first ordering.

Dependencies: sqlalchemy, uuid, workbench.boundary.db.models
System role: Diagram persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import desc
from sqlalchemy.ext.asyncio import AsyncSession

from workbench.boundary.db.models.diagram_model import DiagramModel
from workbench.boundary.db.CRUD.base_crud import BaseCRUD


class DiagramCRUD(BaseCRUD[DiagramModel]):
    """
    CRUD operations for DiagramModel.

    Extends BaseCRUD with workspace-scoped listing. Diagrams are
    immutable once created, so no update helpers are provided.
    """

    def __init__(self) -> None:
        """Initialize DiagramCRUD with DiagramModel."""
        super().__init__(DiagramModel)

    async def get_by_workspace_id(
        self,
        session: AsyncSession,
        workspace_id: UUID,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[DiagramModel]:
        """
        Retrieve all diagrams for a workspace, newest first.

        Args:
            session: Async database session
            workspace_id: Parent workspace UUID
            limit: Maximum number of diagrams to return
            offset: Number of diagrams to skip

        Returns:
            Sequence of DiagramModels belonging to the workspace
        """
        return await self.get_many(
            session,
            DiagramModel.workspace_id == workspace_id,
            order_by=(desc(DiagramModel.created_at),),
            limit=limit,
            offset=offset,
        )

    async def create_diagram(
        self,
        session: AsyncSession,
        workspace_id: UUID,
        prompt: str,
        mermaid_code: str,
    ) -> DiagramModel:
        """
        Create diagram record from generation output.

        Args:
            session: Async database session
            workspace_id: Parent workspace UUID
            prompt: User's diagram description
            mermaid_code: Sanitized Mermaid source

        Returns:
            Created DiagramModel
        """
        return await self.create(
            session,
            workspace_id=workspace_id,
            prompt=prompt,
            mermaid_code=mermaid_code,
        )


diagram_crud = DiagramCRUD()

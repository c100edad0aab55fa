"""
Diagram service for the Artist panel.

Turns a description into Mermaid source via the text generator, cleans
the output with the diagram sanitizer and stores the result.

Dependencies: workbench.boundary.db.CRUD, workbench.core.llm, workbench.core.mermaid
System role: Diagram generation orchestration
"""

import logging
from uuid import UUID

from langchain_core.messages import HumanMessage
from sqlalchemy.ext.asyncio import AsyncSession

from workbench.application.services.workspace_service import require_workspace
from workbench.boundary.db.CRUD.diagram_crud import diagram_crud
from workbench.boundary.db.CRUD.workspace_crud import workspace_crud
from workbench.core.exceptions import DiagramNotFoundError
from workbench.core.llm import TextGenerator
from workbench.core.mermaid import sanitize_diagram_source
from workbench.core.prompts import (
    DIAGRAM_SYSTEM_PROMPT,
    FALLBACK_DIAGRAM,
    build_diagram_request,
)
from workbench.models.diagram import DiagramResponse

logger = logging.getLogger(__name__)


class DiagramService:
    """Artist panel diagram generation and storage."""

    def __init__(self, db: AsyncSession, generator: TextGenerator) -> None:
        """
        Initialize diagram service.

        Args:
            db: Async SQLAlchemy session
            generator: Text generator configured for diagrams
        """
        self.db = db
        self.generator = generator

    async def generate_diagram(
        self,
        user_id: UUID,
        workspace_id: UUID,
        prompt: str,
        context: str | None = None,
    ) -> DiagramResponse:
        """
        Generate, sanitize and store a diagram.

        Flow:
        1. Check workspace ownership
        2. Ask the generator for Mermaid source (prompt prefixed by context)
        3. Substitute the fallback diagram if nothing usable came back
        4. Sanitize and persist

        Args:
            user_id: Requesting user
            workspace_id: Target workspace
            prompt: Diagram description
            context: Optional prior conversation

        Returns:
            DiagramResponse: Stored diagram

        Raises:
            WorkspaceNotFoundError: If the workspace is not the user's
            TextGenerationError: If the generator fails
        """
        await require_workspace(self.db, workspace_id, user_id)

        raw = await self.generator.agenerate(
            DIAGRAM_SYSTEM_PROMPT,
            [HumanMessage(content=build_diagram_request(prompt, context))],
        )
        mermaid_code = sanitize_diagram_source(raw)
        if not mermaid_code:
            logger.warning(
                "Generator returned no diagram, using fallback",
                extra={"workspace_id": str(workspace_id), "raw_len": len(raw)},
            )
            mermaid_code = sanitize_diagram_source(FALLBACK_DIAGRAM)

        diagram = await diagram_crud.create_diagram(
            self.db, workspace_id, prompt, mermaid_code
        )
        logger.info(
            "Diagram created",
            extra={"diagram_id": str(diagram.id), "workspace_id": str(workspace_id)},
        )
        return DiagramResponse.model_validate(diagram)

    async def list_diagrams(
        self,
        user_id: UUID,
        workspace_id: UUID,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[DiagramResponse]:
        """List a workspace's diagrams, newest first."""
        await require_workspace(self.db, workspace_id, user_id)
        diagrams = await diagram_crud.get_by_workspace_id(
            self.db, workspace_id, limit=limit, offset=offset
        )
        return [DiagramResponse.model_validate(d) for d in diagrams]

    async def delete_diagram(self, user_id: UUID, diagram_id: UUID) -> None:
        """
        Delete a diagram from one of the user's workspaces.

        Raises:
            DiagramNotFoundError: If the diagram is missing or not the user's
        """
        diagram = await diagram_crud.get_by_id(self.db, diagram_id)
        if diagram is None or await workspace_crud.get_owned(
            self.db, diagram.workspace_id, user_id
        ) is None:
            raise DiagramNotFoundError(str(diagram_id))

        await diagram_crud.delete(self.db, diagram)
        logger.info("Diagram deleted", extra={"diagram_id": str(diagram_id)})

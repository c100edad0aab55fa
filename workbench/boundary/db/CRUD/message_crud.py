"""
Message CRUD operations.

Provides panel-scoped conversation history queries for MessageModel.

Dependencies: sqlalchemy, workbench.boundary.db.models
System role: Panel conversation persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import asc
from sqlalchemy.ext.asyncio import AsyncSession

from workbench.boundary.db.models.message_model import MessageModel, MessageRole, PanelType
from workbench.boundary.db.CRUD.base_crud import BaseCRUD


class MessageCRUD(BaseCRUD[MessageModel]):
    """CRUD operations for MessageModel."""

    def __init__(self) -> None:
        """Initialize MessageCRUD with MessageModel."""
        super().__init__(MessageModel)

    async def get_by_workspace_and_panel(
        self,
        session: AsyncSession,
        workspace_id: UUID,
        panel_type: PanelType,
    ) -> Sequence[MessageModel]:
        """
        Retrieve one panel's conversation in chronological order.

        Args:
            session: Async database session
            workspace_id: Parent workspace UUID
            panel_type: Panel to read

        Returns:
            Sequence of MessageModels, oldest first
        """
        return await self.get_many(
            session,
            MessageModel.workspace_id == workspace_id,
            MessageModel.panel_type == panel_type.value,
            order_by=(asc(MessageModel.created_at),),
        )

    async def create_message(
        self,
        session: AsyncSession,
        workspace_id: UUID,
        panel_type: PanelType,
        role: MessageRole,
        content: str,
    ) -> MessageModel:
        """
        Append a message to a panel conversation.

        Args:
            session: Async database session
            workspace_id: Parent workspace UUID
            panel_type: Panel the message belongs to
            role: Message author
            content: Message text

        Returns:
            Created MessageModel
        """
        return await self.create(
            session,
            workspace_id=workspace_id,
            panel_type=panel_type.value,
            role=role.value,
            content=content,
        )


message_crud = MessageCRUD()

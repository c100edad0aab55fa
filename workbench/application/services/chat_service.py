"""
Chat service for the Coder and Tutor panels.

Each turn stores the user's message, replays the panel history to the
text generator and stores the reply. The Tutor additionally sees a
summary of recent Coder activity in its system prompt.

Dependencies: workbench.boundary.db.CRUD, workbench.core.llm, workbench.core.prompts
System role: Conversational panel orchestration
"""

import logging
from collections.abc import Sequence
from uuid import UUID

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from sqlalchemy.ext.asyncio import AsyncSession

from workbench.application.services.workspace_service import require_workspace
from workbench.boundary.db.CRUD.message_crud import message_crud
from workbench.boundary.db.CRUD.workspace_crud import workspace_crud
from workbench.boundary.db.base import utc_now
from workbench.boundary.db.models.message_model import (
    MessageModel,
    MessageRole,
    PanelType,
)
from workbench.boundary.db.models.workspace_model import WorkspaceModel
from workbench.core.llm import TextGenerator
from workbench.core.prompts import (
    CODER_SYSTEM_PROMPT,
    EMPTY_REPLY_FALLBACK,
    build_tutor_system_prompt,
)
from workbench.models.chat import ChatExchangeResponse
from workbench.models.message import MessageResponse

logger = logging.getLogger(__name__)


def to_chat_history(messages: Sequence[MessageModel]) -> list[BaseMessage]:
    """Convert stored panel messages into LangChain message objects."""
    history: list[BaseMessage] = []
    for message in messages:
        if message.role == MessageRole.ASSISTANT.value:
            history.append(AIMessage(content=message.content))
        else:
            history.append(HumanMessage(content=message.content))
    return history


class ChatService:
    """Coder and Tutor panel conversations."""

    def __init__(self, db: AsyncSession, generator: TextGenerator) -> None:
        """
        Initialize chat service.

        Args:
            db: Async SQLAlchemy session
            generator: Text generator configured for chat
        """
        self.db = db
        self.generator = generator

    async def send_coder_message(
        self,
        user_id: UUID,
        workspace_id: UUID,
        message: str,
    ) -> ChatExchangeResponse:
        """
        Run one Coder turn.

        Args:
            user_id: Requesting user
            workspace_id: Target workspace
            message: User's message

        Returns:
            ChatExchangeResponse: Stored user message and reply

        Raises:
            WorkspaceNotFoundError: If the workspace is not the user's
            TextGenerationError: If the generator fails
        """
        workspace = await require_workspace(self.db, workspace_id, user_id)
        return await self._exchange(
            workspace,
            PanelType.CODER,
            message,
            system_prompt=CODER_SYSTEM_PROMPT,
        )

    async def send_tutor_message(
        self,
        user_id: UUID,
        workspace_id: UUID,
        message: str,
    ) -> ChatExchangeResponse:
        """
        Run one Tutor turn, grounded in the workspace's recent Coder messages.

        Raises:
            WorkspaceNotFoundError: If the workspace is not the user's
            TextGenerationError: If the generator fails
        """
        workspace = await require_workspace(self.db, workspace_id, user_id)
        coder_messages = await message_crud.get_by_workspace_and_panel(
            self.db, workspace_id, PanelType.CODER
        )
        system_prompt = build_tutor_system_prompt(
            [(m.role, m.content) for m in coder_messages]
        )
        return await self._exchange(
            workspace,
            PanelType.TUTOR,
            message,
            system_prompt=system_prompt,
        )

    async def _exchange(
        self,
        workspace: WorkspaceModel,
        panel_type: PanelType,
        message: str,
        system_prompt: str,
    ) -> ChatExchangeResponse:
        workspace_id = workspace.id

        user_message = await message_crud.create_message(
            self.db, workspace_id, panel_type, MessageRole.USER, message
        )
        history = await message_crud.get_by_workspace_and_panel(
            self.db, workspace_id, panel_type
        )

        logger.info(
            "Generating panel reply",
            extra={
                "workspace_id": str(workspace_id),
                "panel_type": panel_type.value,
                "history_len": len(history),
            },
        )
        reply = await self.generator.agenerate(system_prompt, to_chat_history(history))
        if not reply.strip():
            logger.warning(
                "Empty reply from generator",
                extra={"panel_type": panel_type.value},
            )
            reply = EMPTY_REPLY_FALLBACK

        assistant_message = await message_crud.create_message(
            self.db, workspace_id, panel_type, MessageRole.ASSISTANT, reply
        )
        await workspace_crud.update(self.db, workspace, updated_at=utc_now())

        return ChatExchangeResponse(
            user_message=MessageResponse.model_validate(user_message),
            assistant_message=MessageResponse.model_validate(assistant_message),
        )

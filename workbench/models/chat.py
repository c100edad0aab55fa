"""
Chat panel schemas.

Request/response schemas for the Coder and Tutor panels.

Dependencies: pydantic
System role: Chat API contracts
"""

import uuid

from pydantic import BaseModel, Field

from workbench.models.message import MessageResponse


class ChatRequest(BaseModel):
    """Request schema for a chat turn."""

    workspace_id: uuid.UUID
    message: str = Field(..., min_length=1, max_length=16000, description="User message")


class ChatExchangeResponse(BaseModel):
    """The stored user message and the generated reply."""

    user_message: MessageResponse
    assistant_message: MessageResponse

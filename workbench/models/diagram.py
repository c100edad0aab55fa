"""
Diagram schemas.

Dependencies: pydantic
System role: Artist panel API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DiagramRequest(BaseModel):
    """Request schema for generating a diagram."""

    workspace_id: uuid.UUID
    prompt: str = Field(..., min_length=1, max_length=8000, description="Diagram description")
    context: str | None = Field(
        default=None, max_length=16000, description="Prior conversation to ground the diagram"
    )


class DiagramResponse(BaseModel):
    """A stored, sanitized Mermaid diagram."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    workspace_id: uuid.UUID
    prompt: str
    mermaid_code: str
    created_at: datetime

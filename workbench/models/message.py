"""
Panel message schemas.

Dependencies: pydantic
System role: Chat history API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from workbench.boundary.db.models.message_model import MessageRole, PanelType


class MessageResponse(BaseModel):
    """Single stored panel message."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    workspace_id: uuid.UUID
    panel_type: PanelType
    role: MessageRole
    content: str
    created_at: datetime

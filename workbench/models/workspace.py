"""
Workspace schemas.

Request/response schemas for workspace operations.

Dependencies: pydantic
System role: Workspace API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateWorkspaceRequest(BaseModel):
    """Request schema for creating a workspace."""

    name: str = Field(..., min_length=1, max_length=255, description="Workspace name")
    panel_states: dict[str, bool] | None = Field(
        default=None, description="Visibility per panel (coder, artist, tutor)"
    )


class UpdateWorkspaceRequest(BaseModel):
    """Request schema for renaming a workspace or toggling panels."""

    name: str | None = Field(None, min_length=1, max_length=255, description="Workspace name")
    panel_states: dict[str, bool] | None = Field(
        default=None, description="Visibility per panel (coder, artist, tutor)"
    )


class WorkspaceResponse(BaseModel):
    """Response schema for workspace operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    panel_states: dict[str, bool]
    created_at: datetime
    updated_at: datetime

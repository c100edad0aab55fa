"""
Reminder schemas.

Dependencies: pydantic
System role: Reminder API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateReminderRequest(BaseModel):
    """Request schema for creating a reminder."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=4096)
    reminder_date: datetime
    workspace_id: uuid.UUID | None = None


class UpdateReminderRequest(BaseModel):
    """Request schema for updating a reminder. Omitted fields are left unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=4096)
    reminder_date: datetime | None = None
    completed: bool | None = None


class ReminderResponse(BaseModel):
    """Response schema for reminder operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    workspace_id: uuid.UUID | None
    title: str
    description: str | None
    reminder_date: datetime
    completed: bool
    created_at: datetime
    updated_at: datetime

"""
Auth schemas.

Dependencies: pydantic
System role: Registration and login API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CredentialsRequest(BaseModel):
    """Request schema for register and login."""

    username: str = Field(..., min_length=3, max_length=64, description="Account username")
    password: str = Field(..., min_length=8, max_length=128, description="Plaintext password")


class UserResponse(BaseModel):
    """Public view of a user account."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    username: str
    created_at: datetime

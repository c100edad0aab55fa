"""
Common response models.

Dependencies: pydantic
System role: Shared API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str = Field(description="Error message")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str

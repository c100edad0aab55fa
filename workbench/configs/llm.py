"""
Text-generation settings.

Model selection and call policy for the hosted LLM behind the
Coder, Tutor and Artist panels.

Dependencies: pydantic, pydantic_settings
System role: LLM client configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from workbench.configs.base import BaseSettings


class LLMSettings(BaseSettings):
    """Hosted LLM configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    google_api_key: str | None = Field(default=None, description="Google Generative AI API key")
    model_id: str = Field(default="gemini-2.5-flash", description="Chat model identifier")
    chat_temperature: float = Field(
        default=0.7, ge=0.0, le=2.0, description="Temperature for Coder and Tutor panels"
    )
    diagram_temperature: float = Field(
        default=0.5, ge=0.0, le=2.0, description="Temperature for diagram generation"
    )
    max_retries: int = Field(default=3, ge=1, description="Attempts per generation call")
    timeout_seconds: float = Field(default=60.0, gt=0, description="Per-request timeout")

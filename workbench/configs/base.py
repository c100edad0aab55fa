"""
Application-wide settings.

Values every workbench component reads regardless of concern: which
deployment it runs in, how loudly it logs, and which browser origins may
call the API with the session cookie. Section classes (database, llm,
auth) reuse the same `.env` handling through `model_config`.

Dependencies: pydantic_settings
System role: Shared settings root
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict
from pydantic import Field


class BaseSettings(PydanticBaseSettings):
    """Deployment, logging and CORS settings for the workbench API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name, attached to the startup log line",
    )
    debug: bool = Field(
        default=False,
        description="Run FastAPI in debug mode (tracebacks in 500 responses)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Frontend origins allowed to send the session cookie",
    )

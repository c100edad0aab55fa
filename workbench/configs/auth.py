"""
Authentication settings.

Dependencies: pydantic, pydantic_settings
System role: Session cookie configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from workbench.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Signed session cookie configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    session_secret: str = Field(
        default="dev-secret-change-in-production",
        description="Key used to sign session cookies",
    )
    session_max_age: int = Field(
        default=7 * 24 * 60 * 60,
        description="Session lifetime in seconds",
    )
    cookie_name: str = Field(default="workbench_session", description="Session cookie name")
    cookie_secure: bool = Field(default=False, description="Send cookie over HTTPS only")

"""
Authentication configuration settings.

The service does not establish sessions itself. An upstream gateway
authenticates the caller and forwards the user identifier in a trusted
request header.

Dependencies: pydantic, pydantic_settings
System role: Identity propagation configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from bg_remover.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Identity header configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    user_header: str = Field(
        default="X-User-ID",
        description="Header carrying the authenticated user id from the gateway",
    )

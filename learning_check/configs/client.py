"""
Learning check client configuration.

Settings consumed by the client-side session flow when it talks to the
conversation-session API.

Dependencies: pydantic_settings
System role: Client-side configuration
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class ClientSettings(BaseSettings):
    """Configuration for the conversation session client."""

    model_config = SettingsConfigDict(
        env_prefix="LEARNING_CHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_base_url: str = Field(
        default="http://localhost:8000/api/v1",
        description="Base URL of the conversation-session API",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for conversation-session requests",
    )

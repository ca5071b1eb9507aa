"""
Tavus configuration settings.

Deployment-specific Tavus values (API key, persona, replica) come from
TAVUS_* environment variables. Application-level defaults live here.

Dependencies: pydantic_settings
System role: Conversational video provider configuration
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class TavusSettings(BaseSettings):
    """Tavus Conversational Video Interface configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TAVUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Tavus API key (server side only, never sent to clients)",
    )
    persona_id: str | None = Field(
        default=None,
        description="Default persona used for learning check conversations",
    )
    replica_id: str | None = Field(
        default=None,
        description="Replica (avatar) ID; Tavus uses the persona default when unset",
    )
    api_base_url: str = Field(
        default="https://tavusapi.com/v2",
        description="Tavus API base URL",
    )
    learning_check_duration: int = Field(
        default=180,
        gt=0,
        description="Maximum learning check call duration in seconds",
    )
    webhook_url: str | None = Field(
        default=None,
        description="Callback URL for conversation lifecycle events",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for requests to the Tavus API",
    )

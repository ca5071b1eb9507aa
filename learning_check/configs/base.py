"""
Learning check base settings.

Process-wide values shared by the conversation-session API and the
client flow: which deployment we are in and how loud logging is.
Provider and client settings subclass pydantic-settings directly with
their own env prefix; this class carries the unprefixed values.

Dependencies: pydantic_settings
System role: Root of the learning check configuration tree
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BaseSettings(PydanticBaseSettings):
    """Unprefixed settings read from ENVIRONMENT and LOG_LEVEL."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name logged at API startup",
    )
    log_level: str = Field(
        default="INFO",
        description="Root level passed to configure_logging",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

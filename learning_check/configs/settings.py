"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from learning_check.configs.base import BaseSettings
from learning_check.configs.client import ClientSettings
from learning_check.configs.tavus import TavusSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    tavus: TavusSettings = Field(default_factory=TavusSettings)
    client: ClientSettings = Field(default_factory=ClientSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from learning_check.configs import get_settings
        settings = get_settings()
    """
    return Settings()

"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_conversation_service,
    get_persona_setup_service,
    get_service_cache,
    get_settings_dependency,
    get_tavus_client,
)

__all__ = [
    "get_conversation_service",
    "get_persona_setup_service",
    "get_service_cache",
    "get_settings_dependency",
    "get_tavus_client",
]

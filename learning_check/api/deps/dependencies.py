"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: learning_check.configs, learning_check.application, learning_check.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from learning_check.application.services import ConversationService, PersonaSetupService
from learning_check.boundary.tavus import TavusClient
from learning_check.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._tavus_client = None

    @property
    def tavus_client(self) -> TavusClient:
        """Get cached Tavus client (one connection pool per process)."""
        if self._tavus_client is None:
            settings = get_settings()
            self._tavus_client = TavusClient(
                api_key=settings.tavus.api_key,
                base_url=settings.tavus.api_base_url,
                timeout=settings.tavus.request_timeout,
            )
        return self._tavus_client

    async def aclose(self) -> None:
        """Close and clear all cached instances."""
        if self._tavus_client is not None:
            await self._tavus_client.aclose()
        self._tavus_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_tavus_client() -> TavusClient:
    """
    Get the shared Tavus client.

    Returns:
        TavusClient: Client configured from TAVUS_* settings
    """
    return get_service_cache().tavus_client


def get_conversation_service(
    tavus_client: TavusClient = Depends(get_tavus_client),
    settings: Settings = Depends(get_settings_dependency),
) -> ConversationService:
    """
    Get conversation service instance.

    Args:
        tavus_client: Shared Tavus client (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        ConversationService: Conversation service instance
    """
    return ConversationService(tavus_client=tavus_client, settings=settings.tavus)


def get_persona_setup_service(
    tavus_client: TavusClient = Depends(get_tavus_client),
) -> PersonaSetupService:
    """
    Get persona setup service instance.

    Args:
        tavus_client: Shared Tavus client (injected via Depends)

    Returns:
        PersonaSetupService: Provisioning service instance
    """
    return PersonaSetupService(tavus_client=tavus_client)

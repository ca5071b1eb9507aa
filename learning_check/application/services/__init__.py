"""Application services."""

from learning_check.application.services.conversation_service import ConversationService
from learning_check.application.services.persona_setup_service import PersonaSetupService

__all__ = ["ConversationService", "PersonaSetupService"]

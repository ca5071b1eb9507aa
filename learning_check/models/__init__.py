"""Request/response schemas and client-side session models."""

from learning_check.models.conversation import (
    ChapterContext,
    ConversationHandle,
    CreateConversationRequest,
    CreateConversationResponse,
    EndConversationResponse,
    ErrorResponse,
    SessionSnapshot,
    SessionState,
    TerminateConversationResponse,
)
from learning_check.models.learning_check import (
    GuardrailsResponse,
    ObjectivesResponse,
    PersonaUpdateResponse,
    UpdatePersonaRequest,
)

__all__ = [
    "ChapterContext",
    "ConversationHandle",
    "CreateConversationRequest",
    "CreateConversationResponse",
    "EndConversationResponse",
    "ErrorResponse",
    "GuardrailsResponse",
    "ObjectivesResponse",
    "PersonaUpdateResponse",
    "SessionSnapshot",
    "SessionState",
    "TerminateConversationResponse",
    "UpdatePersonaRequest",
]

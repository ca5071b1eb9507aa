"""
Conversation session API endpoints.

Routes:
- POST /conversation-sessions - Create a learning check conversation
- POST /conversation-sessions/{id}/end - End a conversation gracefully
- DELETE /conversation-sessions/{id} - Terminate a conversation

The Tavus API key stays on the server; clients only ever see the
conversation URL and ID.

Dependencies: learning_check.application.services, learning_check.models
System role: Conversation session HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from learning_check.api.deps import get_conversation_service
from learning_check.api.routers.router_utils import handle_conversation_errors
from learning_check.application.services import ConversationService
from learning_check.models.conversation import (
    CreateConversationRequest,
    CreateConversationResponse,
    EndConversationResponse,
    ErrorResponse,
    TerminateConversationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/conversation-sessions", tags=["conversation-sessions"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=CreateConversationResponse,
    responses=_ERROR_RESPONSES,
)
@handle_conversation_errors
async def create_conversation_session(
    request: CreateConversationRequest,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> CreateConversationResponse:
    """
    Create a Tavus conversation scoped to a chapter.

    Args:
        request: CreateConversationRequest with chapterId and chapterTitle
        conversation_service: Injected ConversationService

    Returns:
        CreateConversationResponse: conversationUrl, conversationId, expiresAt

    Error responses ({"error": ...}):
        400: Missing chapterId or chapterTitle
        500: Tavus configuration missing
        4xx/5xx: Tavus status passed through
    """
    return await conversation_service.create_conversation(request)


@router.post(
    "/{conversation_id}/end",
    response_model=EndConversationResponse,
    responses=_ERROR_RESPONSES,
)
@handle_conversation_errors
async def end_conversation_session(
    conversation_id: str,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> EndConversationResponse:
    """
    End a conversation so the avatar leaves and billing stops.

    Args:
        conversation_id: Tavus conversation ID
        conversation_service: Injected ConversationService

    Returns:
        EndConversationResponse: success flag plus upstream fields
    """
    return await conversation_service.end_conversation(conversation_id)


@router.delete(
    "/{conversation_id}",
    response_model=TerminateConversationResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
@handle_conversation_errors
async def terminate_conversation_session(
    conversation_id: str,
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> TerminateConversationResponse:
    """
    Delete a conversation outright. Already-ended conversations succeed.

    Args:
        conversation_id: Tavus conversation ID
        conversation_service: Injected ConversationService

    Returns:
        TerminateConversationResponse: success flag with ID or message
    """
    return await conversation_service.terminate_conversation(conversation_id)

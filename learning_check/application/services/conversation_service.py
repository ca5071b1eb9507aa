"""
Conversation service orchestrator.

Coordinates learning check conversation lifecycle against Tavus:
creation with chapter context, graceful end, and hard termination.

Dependencies: learning_check.boundary.tavus, learning_check.core
System role: Conversation session use case orchestration
"""

import logging
from typing import Any

from learning_check.boundary.tavus import TavusClient
from learning_check.configs.tavus import TavusSettings
from learning_check.core.exceptions import (
    ConfigurationError,
    ConversationServiceError,
    TavusAPIError,
    ValidationError,
)
from learning_check.core.learning_check_config import (
    build_chapter_context,
    build_greeting,
)
from learning_check.models.conversation import (
    CreateConversationRequest,
    CreateConversationResponse,
    EndConversationResponse,
    TerminateConversationResponse,
)

logger = logging.getLogger(__name__)


class ConversationService:
    """Conversation service orchestrator."""

    def __init__(self, tavus_client: TavusClient, settings: TavusSettings) -> None:
        """
        Initialize conversation service.

        Args:
            tavus_client: Shared Tavus API client
            settings: Tavus configuration
        """
        self.tavus_client = tavus_client
        self.settings = settings

    def build_payload(
        self,
        request: CreateConversationRequest,
        persona_id: str,
    ) -> dict[str, Any]:
        """
        Build the Tavus create-conversation payload for a chapter.

        Args:
            request: Validated create request
            persona_id: Persona to run the conversation with

        Returns:
            dict: Tavus conversation payload
        """
        properties: dict[str, Any] = {
            "max_call_duration": request.time_limit or self.settings.learning_check_duration,
        }
        payload: dict[str, Any] = {
            "persona_id": persona_id,
            "conversation_name": f"Learning Check: {request.chapter_title}",
            "conversational_context": build_chapter_context(
                request.chapter_id, request.chapter_title
            ),
            "custom_greeting": build_greeting(request.chapter_title),
            "properties": properties,
        }
        if self.settings.replica_id:
            payload["replica_id"] = self.settings.replica_id
        if self.settings.webhook_url:
            payload["callback_url"] = self.settings.webhook_url
        return payload

    async def create_conversation(
        self,
        request: CreateConversationRequest,
    ) -> CreateConversationResponse:
        """
        Create a Tavus conversation scoped to a chapter.

        Args:
            request: CreateConversationRequest with chapter context

        Returns:
            CreateConversationResponse: Conversation URL, ID and expiry

        Raises:
            ValidationError: If chapterId or chapterTitle is missing
            ConfigurationError: If the API key or persona is not configured
            ConversationServiceError: If Tavus rejects the request
        """
        if not request.chapter_id.strip() or not request.chapter_title.strip():
            raise ValidationError("Missing required fields: chapterId, chapterTitle")

        persona_id = request.persona_id or self.settings.persona_id
        if not self.tavus_client.is_configured or not persona_id:
            logger.error(
                "Missing Tavus configuration",
                extra={
                    "has_api_key": self.tavus_client.is_configured,
                    "has_persona_id": bool(persona_id),
                },
            )
            raise ConfigurationError(
                "Tavus configuration missing. Please set TAVUS_API_KEY and TAVUS_PERSONA_ID.",
                missing=[
                    name
                    for name, present in (
                        ("TAVUS_API_KEY", self.tavus_client.is_configured),
                        ("TAVUS_PERSONA_ID", bool(persona_id)),
                    )
                    if not present
                ],
            )

        payload = self.build_payload(request, persona_id)

        try:
            data = await self.tavus_client.create_conversation(payload)
        except TavusAPIError as e:
            raise ConversationServiceError(
                "Failed to create Tavus conversation",
                status_code=e.status_code,
                details={"upstream": e.payload},
            ) from e

        conversation_url = data.get("conversation_url")
        conversation_id = data.get("conversation_id")
        if not conversation_url or not conversation_id:
            logger.error("Tavus response missing conversation fields", extra={"keys": list(data)})
            raise ConversationServiceError("Invalid response from Tavus", status_code=502)

        expires_at = data.get("expires_at")
        logger.info(
            f"Created learning check conversation {conversation_id}",
            extra={"chapter_id": request.chapter_id, "conversation_id": conversation_id},
        )
        return CreateConversationResponse(
            conversation_url=conversation_url,
            conversation_id=conversation_id,
            expires_at=str(expires_at) if expires_at is not None else None,
        )

    async def end_conversation(self, conversation_id: str) -> EndConversationResponse:
        """
        End a conversation gracefully.

        Args:
            conversation_id: Tavus conversation ID

        Returns:
            EndConversationResponse: success flag plus upstream fields

        Raises:
            ValidationError: If conversation_id is blank
            ConfigurationError: If the API key is not configured
            ConversationServiceError: If Tavus rejects the request
        """
        if not conversation_id.strip():
            raise ValidationError("Conversation ID is required", field="conversationId")
        if not self.tavus_client.is_configured:
            logger.error("Tavus API key not configured")
            raise ConfigurationError("Server configuration error", missing=["TAVUS_API_KEY"])

        logger.info(f"Ending Tavus conversation {conversation_id}")
        try:
            data = await self.tavus_client.end_conversation(conversation_id)
        except TavusAPIError as e:
            if e.status_code == 400:
                message = e.payload.get("error") or "Invalid conversation_id"
            elif e.status_code == 401:
                message = e.payload.get("message") or "Invalid access token"
            else:
                message = "Failed to end conversation"
            raise ConversationServiceError(message, status_code=e.status_code) from e

        logger.info(f"Conversation ended successfully: {conversation_id}")
        return EndConversationResponse.model_validate(
            {"success": True, "conversation_id": conversation_id, **data}
        )

    async def terminate_conversation(
        self,
        conversation_id: str,
    ) -> TerminateConversationResponse:
        """
        Delete a conversation outright. A conversation Tavus no longer knows counts as ended.

        Args:
            conversation_id: Tavus conversation ID

        Returns:
            TerminateConversationResponse: success flag with ID or message

        Raises:
            ValidationError: If conversation_id is blank
            ConfigurationError: If the API key is not configured
            ConversationServiceError: If Tavus rejects the request
        """
        if not conversation_id.strip():
            raise ValidationError("Missing required field: conversationId", field="conversationId")
        if not self.tavus_client.is_configured:
            logger.error("Missing TAVUS_API_KEY")
            raise ConfigurationError("Tavus configuration missing", missing=["TAVUS_API_KEY"])

        try:
            await self.tavus_client.delete_conversation(conversation_id)
        except TavusAPIError as e:
            if e.status_code == 404:
                return TerminateConversationResponse(message="Conversation already ended")
            logger.error(
                f"Tavus termination error for {conversation_id}",
                extra={"status_code": e.status_code, "error": e.payload},
            )
            raise ConversationServiceError(
                "Failed to terminate conversation",
                status_code=e.status_code,
            ) from e

        logger.info(f"Conversation terminated: {conversation_id}")
        return TerminateConversationResponse(conversation_id=conversation_id)

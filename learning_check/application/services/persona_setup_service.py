"""
Persona setup service.

Provisions the Tavus documents learning checks rely on: guardrails,
objectives, and the persona prompt that references them. Run once per
environment, then reused by every conversation.

Dependencies: learning_check.boundary.tavus, learning_check.core
System role: Learning check provisioning use cases
"""

import logging

from learning_check.boundary.tavus import TavusClient
from learning_check.core.exceptions import (
    ConfigurationError,
    ConversationServiceError,
    TavusAPIError,
    ValidationError,
)
from learning_check.core.learning_check_config import (
    LEARNING_CHECK_GUARDRAILS,
    LEARNING_CHECK_OBJECTIVES,
    build_persona_patch,
)
from learning_check.models.learning_check import (
    GuardrailsResponse,
    ObjectivesResponse,
    PersonaUpdateResponse,
    UpdatePersonaRequest,
)

logger = logging.getLogger(__name__)


class PersonaSetupService:
    """Learning check provisioning orchestrator."""

    def __init__(self, tavus_client: TavusClient) -> None:
        """
        Initialize persona setup service.

        Args:
            tavus_client: Shared Tavus API client
        """
        self.tavus_client = tavus_client

    def _require_api_key(self) -> None:
        if not self.tavus_client.is_configured:
            raise ConfigurationError(
                "TAVUS_API_KEY environment variable is required",
                missing=["TAVUS_API_KEY"],
            )

    async def create_guardrails(self) -> GuardrailsResponse:
        """
        Create the learning check guardrails document.

        Returns:
            GuardrailsResponse: Created guardrails summary

        Raises:
            ConfigurationError: If the API key is not configured
            ConversationServiceError: If Tavus rejects the request
        """
        self._require_api_key()
        try:
            data = await self.tavus_client.create_guardrails(LEARNING_CHECK_GUARDRAILS)
        except TavusAPIError as e:
            raise ConversationServiceError(
                "Failed to create Tavus guardrails",
                status_code=e.status_code,
            ) from e

        logger.info(f"Created guardrails {data.get('guardrails_id')}")
        return GuardrailsResponse(
            guardrails_id=data.get("guardrails_id"),
            guardrails_name=data.get("guardrails_name"),
            status=data.get("status"),
            created_at=data.get("created_at"),
            guardrails=data.get("guardrails") or LEARNING_CHECK_GUARDRAILS["data"],
        )

    async def create_objectives(self) -> ObjectivesResponse:
        """
        Create the recall, application and self-explanation objectives.

        Returns:
            ObjectivesResponse: Created objectives summary

        Raises:
            ConfigurationError: If the API key is not configured
            ConversationServiceError: If Tavus rejects the request
        """
        self._require_api_key()
        try:
            data = await self.tavus_client.create_objectives(LEARNING_CHECK_OBJECTIVES)
        except TavusAPIError as e:
            raise ConversationServiceError(
                "Failed to create Tavus objectives",
                status_code=e.status_code,
            ) from e

        logger.info(f"Created objectives {data.get('objectives_id')}")
        return ObjectivesResponse(
            objectives_id=data.get("objectives_id"),
            objectives_name=data.get("objectives_name"),
            status=data.get("status"),
            created_at=data.get("created_at"),
            objectives=data.get("objectives") or LEARNING_CHECK_OBJECTIVES["data"],
        )

    async def update_persona(self, request: UpdatePersonaRequest) -> PersonaUpdateResponse:
        """
        Align a persona's prompt and context with learning checks.

        Args:
            request: Persona ID plus optional objectives/guardrails IDs to attach

        Returns:
            PersonaUpdateResponse: Updated persona summary

        Raises:
            ValidationError: If persona_id is missing
            ConfigurationError: If the API key is not configured
            ConversationServiceError: If Tavus rejects the request
        """
        if not request.persona_id.strip():
            raise ValidationError("persona_id is required", field="persona_id")
        self._require_api_key()

        operations = build_persona_patch(request.objectives_id, request.guardrails_id)
        logger.info(
            f"Updating persona {request.persona_id}",
            extra={"operations": [f"{op['op']} {op['path']}" for op in operations]},
        )

        try:
            data = await self.tavus_client.update_persona(request.persona_id, operations)
        except TavusAPIError as e:
            raise ConversationServiceError(
                "Failed to update Tavus persona",
                status_code=e.status_code,
            ) from e

        return PersonaUpdateResponse(
            persona_id=data.get("persona_id"),
            persona_name=data.get("persona_name"),
            status=data.get("status"),
            updated_at=data.get("updated_at"),
            has_objectives=bool(request.objectives_id),
            has_guardrails=bool(request.guardrails_id),
        )

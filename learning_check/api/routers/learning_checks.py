"""
Learning check provisioning endpoints.

Routes:
- POST /learning-checks/guardrails - Create guardrails document
- POST /learning-checks/objectives - Create objectives document
- PATCH /learning-checks/persona - Align persona with objectives/guardrails

Dependencies: learning_check.application.services, learning_check.models
System role: Provisioning HTTP API
"""

from fastapi import APIRouter, Depends

from learning_check.api.deps import get_persona_setup_service
from learning_check.api.routers.router_utils import handle_conversation_errors
from learning_check.application.services import PersonaSetupService
from learning_check.models.conversation import ErrorResponse
from learning_check.models.learning_check import (
    GuardrailsResponse,
    ObjectivesResponse,
    PersonaUpdateResponse,
    UpdatePersonaRequest,
)

router = APIRouter(prefix="/learning-checks", tags=["learning-checks"])

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post("/guardrails", response_model=GuardrailsResponse, responses=_ERROR_RESPONSES)
@handle_conversation_errors
async def create_guardrails(
    setup_service: PersonaSetupService = Depends(get_persona_setup_service),
) -> GuardrailsResponse:
    """Create the learning check guardrails in Tavus."""
    return await setup_service.create_guardrails()


@router.post("/objectives", response_model=ObjectivesResponse, responses=_ERROR_RESPONSES)
@handle_conversation_errors
async def create_objectives(
    setup_service: PersonaSetupService = Depends(get_persona_setup_service),
) -> ObjectivesResponse:
    """Create the learning check objectives in Tavus."""
    return await setup_service.create_objectives()


@router.patch("/persona", response_model=PersonaUpdateResponse, responses=_ERROR_RESPONSES)
@handle_conversation_errors
async def update_persona(
    request: UpdatePersonaRequest,
    setup_service: PersonaSetupService = Depends(get_persona_setup_service),
) -> PersonaUpdateResponse:
    """
    Replace the persona prompt/context and attach objectives and guardrails.

    Args:
        request: persona_id plus optional objectives_id and guardrails_id
        setup_service: Injected PersonaSetupService

    Returns:
        PersonaUpdateResponse: Updated persona summary
    """
    return await setup_service.update_persona(request)

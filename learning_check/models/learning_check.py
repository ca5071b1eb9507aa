"""
Learning check provisioning schemas.

Request/response schemas for creating guardrails and objectives and for
aligning a persona with them.

Dependencies: pydantic
System role: Provisioning API contracts
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UpdatePersonaRequest(BaseModel):
    """Request schema for aligning a persona with learning check documents."""

    persona_id: str = ""
    objectives_id: str | None = None
    guardrails_id: str | None = None


class GuardrailsResponse(BaseModel):
    """Created guardrails document."""

    model_config = ConfigDict(populate_by_name=True)

    guardrails_id: str | None = Field(default=None, alias="guardrailsId")
    guardrails_name: str | None = Field(default=None, alias="guardrailsName")
    status: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    guardrails: list[dict[str, Any]] = Field(default_factory=list)


class ObjectivesResponse(BaseModel):
    """Created objectives document."""

    model_config = ConfigDict(populate_by_name=True)

    objectives_id: str | None = Field(default=None, alias="objectivesId")
    objectives_name: str | None = Field(default=None, alias="objectivesName")
    status: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    objectives: list[dict[str, Any]] = Field(default_factory=list)


class PersonaUpdateResponse(BaseModel):
    """Updated persona summary."""

    model_config = ConfigDict(populate_by_name=True)

    persona_id: str | None = Field(default=None, alias="personaId")
    persona_name: str | None = Field(default=None, alias="personaName")
    status: str | None = None
    updated_at: str | None = Field(default=None, alias="updatedAt")
    has_objectives: bool = Field(default=False, alias="hasObjectives")
    has_guardrails: bool = Field(default=False, alias="hasGuardrails")

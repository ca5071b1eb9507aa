"""
Test suite for the learning check provisioning routes.

System role: Verification of provisioning HTTP API
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from learning_check.api.deps import get_persona_setup_service
from learning_check.api.routers.learning_checks import router as learning_checks_router
from learning_check.application.services import PersonaSetupService
from learning_check.core.exceptions import ConversationServiceError
from learning_check.models.learning_check import GuardrailsResponse, ObjectivesResponse


@pytest.fixture
def app():
    app = FastAPI()
    app.include_router(learning_checks_router)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_setup_service():
    return AsyncMock()


def test_create_guardrails(client, mock_setup_service):
    mock_setup_service.create_guardrails.return_value = GuardrailsResponse(
        guardrails_id="g-1", status="active", guardrails=[{"guardrail_name": "quiz_answer_protection"}]
    )
    client.app.dependency_overrides[get_persona_setup_service] = lambda: mock_setup_service

    response = client.post("/learning-checks/guardrails")

    assert response.status_code == 200
    data = response.json()
    assert data["guardrailsId"] == "g-1"
    assert data["guardrails"][0]["guardrail_name"] == "quiz_answer_protection"


def test_create_objectives_upstream_failure(client, mock_setup_service):
    mock_setup_service.create_objectives.side_effect = ConversationServiceError(
        "Failed to create Tavus objectives", status_code=503
    )
    client.app.dependency_overrides[get_persona_setup_service] = lambda: mock_setup_service

    response = client.post("/learning-checks/objectives")

    assert response.status_code == 503
    assert response.json() == {"error": "Failed to create Tavus objectives"}


def test_create_objectives(client, mock_setup_service):
    mock_setup_service.create_objectives.return_value = ObjectivesResponse(objectives_id="o-1")
    client.app.dependency_overrides[get_persona_setup_service] = lambda: mock_setup_service

    response = client.post("/learning-checks/objectives")

    assert response.status_code == 200
    assert response.json()["objectivesId"] == "o-1"


def test_update_persona_requires_persona_id(client):
    tavus_client = AsyncMock()
    tavus_client.is_configured = True
    service = PersonaSetupService(tavus_client=tavus_client)
    client.app.dependency_overrides[get_persona_setup_service] = lambda: service

    response = client.patch("/learning-checks/persona", json={"objectives_id": "o-1"})

    assert response.status_code == 400
    assert response.json() == {"error": "persona_id is required"}
    tavus_client.update_persona.assert_not_called()


def test_update_persona_without_api_key_returns_500(client):
    tavus_client = AsyncMock()
    tavus_client.is_configured = False
    service = PersonaSetupService(tavus_client=tavus_client)
    client.app.dependency_overrides[get_persona_setup_service] = lambda: service

    response = client.patch("/learning-checks/persona", json={"persona_id": "p-1"})

    assert response.status_code == 500
    assert response.json() == {"error": "TAVUS_API_KEY environment variable is required"}


def test_update_persona(client):
    tavus_client = AsyncMock()
    tavus_client.is_configured = True
    tavus_client.update_persona.return_value = {"persona_id": "p-1", "persona_name": "Instructor"}
    service = PersonaSetupService(tavus_client=tavus_client)
    client.app.dependency_overrides[get_persona_setup_service] = lambda: service

    response = client.patch(
        "/learning-checks/persona",
        json={"persona_id": "p-1", "guardrails_id": "g-1"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["personaId"] == "p-1"
    assert data["hasGuardrails"] is True
    assert data["hasObjectives"] is False

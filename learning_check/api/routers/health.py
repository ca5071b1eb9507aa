"""
Health check API endpoints.

Routes: GET /health, GET /health/tavus

Dependencies: learning_check.boundary
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from learning_check.api.deps import get_tavus_client
from learning_check.boundary.tavus import TavusClient


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/tavus", response_model=HealthResponse)
async def health_check_tavus(
    tavus_client: TavusClient = Depends(get_tavus_client),
) -> HealthResponse:
    """Report whether the Tavus API key is configured (does not call Tavus)."""
    if not tavus_client.is_configured:
        return HealthResponse(status="degraded", message="Tavus API key not configured")
    return HealthResponse(status="healthy", message="Tavus API key configured")

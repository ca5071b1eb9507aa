"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, learning_check.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from learning_check import __version__
from learning_check.api.deps import get_service_cache
from learning_check.api.routers.router_utils import error_response
from learning_check.configs import get_settings
from learning_check.observability.logger import configure_logging
from learning_check.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import (
    conversation_sessions_router,
    health_router,
    learning_checks_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Application startup ({settings.environment})")

    if not settings.tavus.api_key:
        logger.warning("TAVUS_API_KEY is not set; conversation endpoints will return 500")

    yield

    # Shutdown
    await get_service_cache().aclose()
    logger.info("Service cache cleared")


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies in the same {"error": ...} shape as the routes."""
    logger.warning(
        f"Invalid request body: {request.method} {request.url.path}",
        extra={"errors": exc.errors()},
    )
    return error_response("Invalid request body", status.HTTP_400_BAD_REQUEST)


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Learning Check API",
        description="Conversation sessions for AI-avatar learning checks",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(conversation_sessions_router, prefix="/api/v1")
    app.include_router(learning_checks_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "learning_check.api.main:app",
        host="0.0.0.0",
        port=8000,
    )

"""
Conversation error handling utilities.

Provides a decorator for consistent error handling across the
conversation-session and provisioning endpoints. Every failure is
returned as {"error": "<message>"} with the mapped status code.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from learning_check.core.exceptions import (
    ConfigurationError,
    ConversationServiceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build the error body every conversation route returns."""
    return JSONResponse(status_code=status_code, content={"error": message})


def handle_conversation_errors(func: F) -> F:
    """
    Decorator to turn domain errors into {"error": ...} JSON responses.

    This centralizes:
    - Logging of errors with context
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except ValidationError as e:
            logger.warning("Invalid conversation request", extra={"error": str(e)})
            return error_response(e.message, status.HTTP_400_BAD_REQUEST)

        except ConfigurationError as e:
            logger.error("Conversation provider misconfigured", extra={"error": str(e)})
            return error_response(e.message, status.HTTP_500_INTERNAL_SERVER_ERROR)

        except ConversationServiceError as e:
            logger.warning(
                "Conversation provider request failed",
                extra={"status_code": e.status_code, "error": str(e)},
            )
            return error_response(e.message, e.status_code)

        except PydanticValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            return error_response("Invalid response data", status.HTTP_502_BAD_GATEWAY)

        except Exception as e:
            logger.exception(
                "Unexpected failure in conversation operation",
                extra={"error": str(e)},
            )
            return error_response("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)

    return wrapper  # type: ignore

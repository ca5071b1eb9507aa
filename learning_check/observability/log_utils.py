"""
Structured logging helpers for the learning check flow.

Every record gets the current correlation ID, and credential-bearing
fields (Tavus API key, learner bearer token) are masked before they
reach a handler.

Dependencies: logging (stdlib), learning_check.observability.correlation
System role: Logging helper functions
"""

import logging
from datetime import datetime
from typing import Any

from learning_check.observability.correlation import get_correlation_id

REDACTED = "***"

_SECRET_FIELDS = frozenset({"api_key", "access_token", "authorization", "x_api_key", "token"})


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Render a value for a log record's extra fields.

    Collections are summarized by size and datetimes use ISO-8601, so a
    conversation payload or handle never floods the log line.

    Args:
        value: Value to render
        max_length: Maximum length before truncating

    Returns:
        str: Printable representation
    """
    if value is None:
        return "None"
    if isinstance(value, datetime):
        text = value.isoformat()
    elif isinstance(value, str):
        text = value
    elif isinstance(value, (list, tuple, set)):
        text = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        text = f"dict({len(value)} keys)"
    else:
        try:
            text = str(value)
        except Exception as e:
            return f"<unprintable {type(value).__name__}: {type(e).__name__}>"

    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def _context_fields(context: dict[str, Any]) -> dict[str, str]:
    fields = {
        key: REDACTED if key.lower() in _SECRET_FIELDS else safe_log_value(value)
        for key, value in context.items()
    }
    correlation_id = get_correlation_id()
    if correlation_id:
        fields.setdefault("correlation_id", correlation_id)
    return fields


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with masked, correlated context fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Fields such as chapter_id or conversation_id
    """
    logger.log(level, message, extra=_context_fields(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log a failed session operation at ERROR with its traceback.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception that ended the operation
        **context: Fields such as chapter_id or conversation_id
    """
    fields = _context_fields(context)
    fields["error_type"] = type(exc).__name__
    fields["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=fields)

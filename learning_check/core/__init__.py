"""
Core business logic module.

Contains the exception hierarchy and the learning check provider
configuration (objectives, guardrails, persona, context builders).
"""

from learning_check.core.exceptions import (
    ConfigurationError,
    ConversationServiceError,
    LearningCheckException,
    LocalDeviceError,
    SessionCreationError,
    SessionTeardownError,
    TavusAPIError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "ConversationServiceError",
    "LearningCheckException",
    "LocalDeviceError",
    "SessionCreationError",
    "SessionTeardownError",
    "TavusAPIError",
    "ValidationError",
]

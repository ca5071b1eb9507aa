"""
Exception hierarchy for the Learning Check application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class LearningCheckException(Exception):
    """Base exception for all Learning Check application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(LearningCheckException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ConfigurationError(LearningCheckException):
    """Raised when required provider credentials or identifiers are missing."""

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message safe to return to clients
            missing: Names of the missing settings
            details: Additional context
        """
        details = details or {}
        if missing:
            details["missing"] = missing
        super().__init__(message, details)


class LocalDeviceError(LearningCheckException):
    """Raised when the camera or microphone cannot be obtained."""

    def __init__(
        self,
        message: str,
        reason: str = "not_found",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize local device error.

        Args:
            message: Error message shown to the learner
            reason: Either "not_found" or "permission_denied"
            details: Additional context
        """
        details = details or {}
        details["reason"] = reason
        self.reason = reason
        super().__init__(message, details)


class SessionCreationError(LearningCheckException):
    """Raised when a remote conversation could not be created."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize session creation error.

        Args:
            message: Server-reported or generic error message
            status_code: HTTP status returned by the boundary, if any
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class SessionTeardownError(LearningCheckException):
    """Raised internally when ending a remote conversation fails (never surfaced)."""

    def __init__(
        self,
        message: str,
        conversation_id: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize session teardown error.

        Args:
            message: Error message
            conversation_id: Conversation that could not be ended
            details: Additional context
        """
        details = details or {}
        details["conversation_id"] = conversation_id
        self.conversation_id = conversation_id
        super().__init__(message, details)


class TavusAPIError(LearningCheckException):
    """Raised when the Tavus API returns a non-2xx response or is unreachable."""

    def __init__(
        self,
        message: str,
        status_code: int,
        payload: dict[str, Any] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize Tavus API error.

        Args:
            message: Error message
            status_code: HTTP status from Tavus (502 when unreachable)
            payload: Decoded error body, empty when absent or not JSON
            details: Additional context
        """
        details = details or {}
        details["status_code"] = status_code
        self.status_code = status_code
        self.payload = payload or {}
        super().__init__(message, details)


class ConversationServiceError(LearningCheckException):
    """Raised by application services with the HTTP status to report."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize conversation service error.

        Args:
            message: Error message safe to return to clients
            status_code: HTTP status code for the response
            details: Additional context
        """
        self.status_code = status_code
        super().__init__(message, details)

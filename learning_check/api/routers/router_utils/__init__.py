"""Shared router helpers."""

from .error_handling import error_response, handle_conversation_errors

__all__ = ["error_response", "handle_conversation_errors"]

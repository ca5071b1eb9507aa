"""
Conversation session client.

Sole boundary between the learning check flow and the conversation-session
API. Creates and ends remote conversations and converts every network
failure into SessionCreationError (create) or a logged
SessionTeardownError (end) before it reaches the orchestrator.

Dependencies: httpx, learning_check.models
System role: Client-side session lifecycle boundary
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from learning_check.configs.client import ClientSettings
from learning_check.core.exceptions import SessionCreationError, SessionTeardownError
from learning_check.models.conversation import ConversationHandle
from learning_check.observability.correlation import CORRELATION_HEADER, get_correlation_id
from learning_check.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

DEFAULT_CREATE_ERROR = "Failed to create conversation"
UNREACHABLE_ERROR = "Failed to start learning check. Please try again."


class ConversationSessionClient:
    """HTTP client for the conversation-session API."""

    def __init__(
        self,
        base_url: str,
        access_token: str | None = None,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize session client.

        Args:
            base_url: API base URL, e.g. http://localhost:8000/api/v1
            access_token: Bearer token from the surrounding auth provider
            timeout: Request timeout in seconds
            http_client: Optional preconfigured client; not closed by aclose()
        """
        self._base_url = base_url.rstrip("/")
        self._access_token = access_token
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        access_token: str | None = None,
    ) -> "ConversationSessionClient":
        """Build a client from ClientSettings."""
        return cls(
            base_url=settings.api_base_url,
            access_token=access_token,
            timeout=settings.request_timeout,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        correlation_id = get_correlation_id()
        if correlation_id:
            headers[CORRELATION_HEADER] = correlation_id
        return headers

    async def create_session(
        self,
        chapter_id: str,
        chapter_title: str,
        time_limit: int | None = None,
        *,
        course_id: str | None = None,
        persona_id: str | None = None,
    ) -> ConversationHandle:
        """
        Create a remote conversation for a chapter. Single attempt, never retried.

        Args:
            chapter_id: Chapter identifier
            chapter_title: Chapter title shown to the AI instructor
            time_limit: Optional maximum call duration in seconds
            course_id: Optional course identifier
            persona_id: Optional persona override

        Returns:
            ConversationHandle: URL and ID of the created conversation

        Raises:
            SessionCreationError: On non-2xx, transport failure, or malformed body
        """
        body: dict[str, Any] = {"chapterId": chapter_id, "chapterTitle": chapter_title}
        if course_id is not None:
            body["courseId"] = course_id
        if time_limit is not None:
            body["timeLimit"] = time_limit
        if persona_id is not None:
            body["personaId"] = persona_id

        try:
            response = await self._client.post(
                f"{self._base_url}/conversation-sessions",
                json=body,
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            log_exception_with_context(
                logger,
                "Failed to create conversation: transport error",
                e,
                chapter_id=chapter_id,
            )
            raise SessionCreationError(UNREACHABLE_ERROR) from e

        if response.is_error:
            message = _error_message(response)
            logger.error(
                f"Failed to create conversation: {response.status_code} {message}",
                extra={"chapter_id": chapter_id, "status_code": response.status_code},
            )
            raise SessionCreationError(message, status_code=response.status_code)

        try:
            handle = ConversationHandle.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            logger.error(
                "Conversation response missing conversationUrl/conversationId",
                extra={"chapter_id": chapter_id, "status_code": response.status_code},
            )
            raise SessionCreationError(
                DEFAULT_CREATE_ERROR, status_code=response.status_code
            ) from e
        except Exception as e:
            log_exception_with_context(
                logger,
                "Conversation response could not be decoded",
                e,
                chapter_id=chapter_id,
                status_code=response.status_code,
            )
            raise SessionCreationError(
                DEFAULT_CREATE_ERROR, status_code=response.status_code
            ) from e

        logger.info(
            f"Conversation created: {handle.conversation_id}",
            extra={"chapter_id": chapter_id, "conversation_id": handle.conversation_id},
        )
        return handle

    async def end_session(self, conversation_id: str) -> None:
        """
        End a remote conversation. Best-effort: failures are logged, never raised.

        Args:
            conversation_id: Conversation to end
        """
        try:
            response = await self._client.post(
                f"{self._base_url}/conversation-sessions/{conversation_id}/end",
                headers=self._headers(),
            )
        except Exception as e:
            teardown_error = SessionTeardownError(
                f"End conversation failed: {type(e).__name__}",
                conversation_id=conversation_id,
            )
            log_exception_with_context(
                logger,
                teardown_error.message,
                e,
                conversation_id=conversation_id,
            )
            return

        if response.is_error:
            reason = _error_message(response, default="no error body")
            teardown_error = SessionTeardownError(
                f"End conversation returned {response.status_code}: {reason}",
                conversation_id=conversation_id,
            )
            logger.warning(str(teardown_error), extra={"conversation_id": conversation_id})
            return

        logger.info(f"Conversation ended: {conversation_id}")

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ConversationSessionClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _error_message(response: httpx.Response, default: str = DEFAULT_CREATE_ERROR) -> str:
    """Extract the server-reported error, falling back to a generic message."""
    try:
        data = response.json()
    except ValueError:
        return default
    if isinstance(data, dict):
        for key in ("error", "detail", "message"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return default

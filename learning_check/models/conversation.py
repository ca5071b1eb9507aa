"""
Conversation domain models and schemas.

Wire schemas for the conversation-session API (camelCase on the wire)
and the client-side session state types.

Dependencies: pydantic
System role: Conversation session API contracts
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SessionState(str, Enum):
    """Screen the learning check flow is currently showing."""

    READY = "ready"
    HAIR_CHECK = "hairCheck"
    CALL = "call"


class ChapterContext(BaseModel):
    """Chapter a learning check is scoped to. Supplied by the course page."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    chapter_id: str = Field(alias="chapterId")
    chapter_title: str = Field(alias="chapterTitle")
    course_id: str | None = Field(default=None, alias="courseId")


class ConversationHandle(BaseModel):
    """Remote conversation returned by a successful session creation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    conversation_url: str = Field(alias="conversationUrl", min_length=1)
    conversation_id: str = Field(alias="conversationId", min_length=1)
    expires_at: datetime | None = Field(default=None, alias="expiresAt")

    @field_validator("expires_at", mode="before")
    @classmethod
    def _parse_expires_at(cls, value: Any) -> datetime | None:
        """Accept ISO-8601 strings or epoch seconds; unparseable values become None."""
        if value is None or value == "" or isinstance(value, bool):
            return None
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, (int, float)):
            try:
                return datetime.fromtimestamp(value, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                return None
        elif isinstance(value, str):
            try:
                parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                return None
        else:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    def is_expired(self, now: datetime) -> bool:
        """Return True when the conversation has an expiry that is not after now."""
        return self.expires_at is not None and self.expires_at <= now


class SessionSnapshot(BaseModel):
    """Immutable view of the orchestrator for rendering."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    state: SessionState
    conversation: ConversationHandle | None = None
    error: str | None = None
    is_loading: bool = Field(default=False, alias="isLoading")


class CreateConversationRequest(BaseModel):
    """Request schema for creating a learning check conversation."""

    model_config = ConfigDict(populate_by_name=True)

    # Blank defaults so missing fields reach the service and yield a 400
    chapter_id: str = Field(default="", alias="chapterId")
    chapter_title: str = Field(default="", alias="chapterTitle")
    course_id: str | None = Field(default=None, alias="courseId")
    time_limit: int | None = Field(default=None, alias="timeLimit", gt=0)
    persona_id: str | None = Field(default=None, alias="personaId")


class CreateConversationResponse(BaseModel):
    """Response schema for a created conversation."""

    model_config = ConfigDict(populate_by_name=True)

    conversation_url: str = Field(alias="conversationUrl")
    conversation_id: str = Field(alias="conversationId")
    expires_at: str | None = Field(default=None, alias="expiresAt")


class EndConversationResponse(BaseModel):
    """Response schema for an ended conversation. Upstream fields pass through."""

    model_config = ConfigDict(extra="allow")

    success: bool = True
    conversation_id: str


class TerminateConversationResponse(BaseModel):
    """Response schema for a terminated conversation."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    conversation_id: str | None = Field(default=None, alias="conversationId")
    message: str | None = None


class ErrorResponse(BaseModel):
    """Error body returned by every conversation-session route."""

    error: str

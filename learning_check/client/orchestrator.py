"""
Learning check orchestrator.

State machine behind the learning check screens:

    ready --start--> hairCheck --join--> call --leave--> ready
                         |
                         +--cancel--> ready

A conversation handle is held exactly while the state is call. Creation
failures return to ready with an error message; leaving always returns
to ready and drops the handle, whatever the remote end call does.

Dependencies: learning_check.client, learning_check.models
System role: Client-side session flow coordinator
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from learning_check.client.devices import DeviceProbe
from learning_check.client.hair_check import HairCheck
from learning_check.client.renderer import ConversationRenderer, NullRenderer
from learning_check.client.session_client import ConversationSessionClient
from learning_check.core.exceptions import SessionCreationError
from learning_check.models.conversation import (
    ChapterContext,
    ConversationHandle,
    SessionSnapshot,
    SessionState,
)

logger = logging.getLogger(__name__)

EXPIRED_ERROR = "Conversation expired before it could be joined"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LearningCheckOrchestrator:
    """Drives one learner through ready, hair check and call for a chapter."""

    def __init__(
        self,
        chapter: ChapterContext,
        session_client: ConversationSessionClient,
        device_probe: DeviceProbe,
        renderer: ConversationRenderer | None = None,
        time_limit: int | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Initialize orchestrator in the ready state.

        Args:
            chapter: Chapter the conversation is about
            session_client: Client for the conversation-session API
            device_probe: Local camera/microphone probe for the hair check
            renderer: Where the live conversation is shown
            time_limit: Optional maximum call duration in seconds
            clock: Returns the current aware UTC time (expiry guard)
        """
        self.chapter = chapter
        self._session_client = session_client
        self._renderer = renderer or NullRenderer()
        self._time_limit = time_limit
        self._clock = clock

        self._state = SessionState.READY
        self._conversation: ConversationHandle | None = None
        self._error: str | None = None
        self._loading = False

        self.hair_check = HairCheck(
            probe=device_probe,
            on_join=self._create_conversation,
            on_cancel=self._return_to_ready,
        )

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def conversation(self) -> ConversationHandle | None:
        return self._conversation

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def is_loading(self) -> bool:
        return self._loading

    def snapshot(self) -> SessionSnapshot:
        """Return an immutable view of the current screen state."""
        return SessionSnapshot(
            state=self._state,
            conversation=self._conversation,
            error=self._error,
            is_loading=self._loading,
        )

    def start(self) -> None:
        """Move from ready to the hair check."""
        if self._state is not SessionState.READY:
            logger.warning(f"Ignoring start in state {self._state.value}")
            return
        self._error = None
        self._state = SessionState.HAIR_CHECK
        logger.info(f"Learning check started for chapter {self.chapter.chapter_id}")

    async def join(self) -> None:
        """
        Join from the hair check: verify devices, then create the conversation.

        Re-entrant calls while a join is pending are ignored, so at most one
        create request is ever in flight.
        """
        if self._state is not SessionState.HAIR_CHECK:
            logger.warning(f"Ignoring join in state {self._state.value}")
            return
        if self._loading:
            logger.debug("Join already in progress; ignoring duplicate")
            return

        self._loading = True
        self._error = None
        try:
            await self.hair_check.request_join()
        finally:
            self._loading = False

    def cancel(self) -> None:
        """Back out of the hair check to ready."""
        if self._state is not SessionState.HAIR_CHECK:
            logger.warning(f"Ignoring cancel in state {self._state.value}")
            return
        if self._loading:
            logger.warning("Ignoring cancel while a join is pending")
            return
        self.hair_check.cancel()

    async def leave(self) -> None:
        """
        Leave the call. Always ends in ready with no handle.

        The remote end request is best-effort and runs after the handle has
        been dropped.
        """
        if self._state is not SessionState.CALL or self._conversation is None:
            logger.warning(f"Ignoring leave in state {self._state.value}")
            return

        handle = self._conversation
        self._conversation = None
        self._state = SessionState.READY

        self._close_renderer()
        await self._session_client.end_session(handle.conversation_id)
        logger.info(f"Left learning check conversation {handle.conversation_id}")

    async def _create_conversation(self) -> None:
        """Join callback run by the hair check once devices are confirmed."""
        try:
            handle = await self._session_client.create_session(
                self.chapter.chapter_id,
                self.chapter.chapter_title,
                self._time_limit,
                course_id=self.chapter.course_id,
            )
        except SessionCreationError as e:
            self._fail(e.message)
            return

        if handle.is_expired(self._clock()):
            logger.warning(
                f"Conversation {handle.conversation_id} expired at {handle.expires_at}",
                extra={"conversation_id": handle.conversation_id},
            )
            await self._session_client.end_session(handle.conversation_id)
            self._fail(EXPIRED_ERROR)
            return

        self._conversation = handle
        self._state = SessionState.CALL
        self._open_renderer(handle)

    def _fail(self, message: str) -> None:
        logger.error(
            f"Failed to start learning check: {message}",
            extra={"chapter_id": self.chapter.chapter_id},
        )
        self._error = message
        self._state = SessionState.READY

    def _return_to_ready(self) -> None:
        self._error = None
        self._state = SessionState.READY

    def _open_renderer(self, handle: ConversationHandle) -> None:
        try:
            self._renderer.open(handle.conversation_url)
        except Exception:
            logger.exception(
                "Renderer failed to open conversation",
                extra={"conversation_id": handle.conversation_id},
            )

    def _close_renderer(self) -> None:
        try:
            self._renderer.close()
        except Exception:
            logger.exception("Renderer failed to close conversation")

"""
Conversation renderers.

The renderer owns the live audio/video session for a conversation URL.
The learning check flow only hands it the URL and closes it on leave.

Dependencies: webbrowser (stdlib)
System role: Conversation rendering boundary
"""

import logging
import webbrowser
from typing import Protocol

logger = logging.getLogger(__name__)


class ConversationRenderer(Protocol):
    """Embeds a remote conversation given its URL."""

    def open(self, conversation_url: str) -> None:
        ...

    def close(self) -> None:
        ...


class NullRenderer:
    """Renderer that only records what it was asked to show."""

    def __init__(self) -> None:
        self.opened: list[str] = []
        self.closed = 0
        self.current_url: str | None = None

    def open(self, conversation_url: str) -> None:
        self.opened.append(conversation_url)
        self.current_url = conversation_url

    def close(self) -> None:
        self.closed += 1
        self.current_url = None


class BrowserRenderer:
    """Opens the conversation in the platform web browser."""

    def __init__(self, new_window: bool = True) -> None:
        self.new_window = new_window

    def open(self, conversation_url: str) -> None:
        opened = webbrowser.open(conversation_url, new=1 if self.new_window else 2)
        if not opened:
            logger.warning(f"No browser available to open {conversation_url}")

    def close(self) -> None:
        # The browser tab is owned by the learner; leaving the call ends it remotely
        logger.debug("Browser renderer closed")

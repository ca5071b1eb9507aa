"""
Shared test fixtures and configuration for entire test suite.

Provides: Tavus settings, mock-transport HTTP helpers, chapter context
Dependencies: pytest, httpx
System role: Test infrastructure and fixture management
"""

import json
from typing import Any, Callable

import httpx
import pytest

from learning_check.configs.tavus import TavusSettings
from learning_check.models.conversation import ChapterContext


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def json_bodies(self) -> list[Any]:
        """Decoded JSON bodies of the recorded requests (None when empty)."""
        return [json.loads(r.content) if r.content else None for r in self.requests]


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """Factory building a RecordingTransport from a request handler."""
    return RecordingTransport


@pytest.fixture
def tavus_settings() -> TavusSettings:
    """Tavus settings with every credential present."""
    return TavusSettings(
        api_key="test-api-key",
        persona_id="p-default",
        replica_id="r-replica",
        webhook_url=None,
        learning_check_duration=180,
        _env_file=None,
    )


@pytest.fixture
def chapter() -> ChapterContext:
    """Chapter used by learning check flow tests."""
    return ChapterContext(
        chapter_id="ch-1",
        chapter_title="EMDR Foundations",
        course_id="course-1",
    )

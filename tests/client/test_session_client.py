"""
Test suite for ConversationSessionClient.

Exercises the client against an in-memory transport: request shape,
error-message surfacing on create, and best-effort end.

System role: Verification of the client-side session boundary
"""

import logging

import httpx
import pytest

from learning_check.client.session_client import (
    DEFAULT_CREATE_ERROR,
    UNREACHABLE_ERROR,
    ConversationSessionClient,
)
from learning_check.configs.client import ClientSettings
from learning_check.core.exceptions import SessionCreationError
from learning_check.observability.correlation import clear_correlation_id, set_correlation_id

BASE_URL = "http://api.test/api/v1"


def _client(transport: httpx.AsyncBaseTransport, token: str | None = "token-1"):
    return ConversationSessionClient(
        BASE_URL,
        access_token=token,
        http_client=httpx.AsyncClient(transport=transport),
    )


class TestCreateSession:
    """Test suite for ConversationSessionClient.create_session."""

    @pytest.mark.asyncio
    async def test_create_should_post_chapter_and_return_handle(self, recording_transport) -> None:
        transport = recording_transport(
            lambda request: httpx.Response(
                200,
                json={
                    "conversationUrl": "https://tavus.daily.co/c-1",
                    "conversationId": "c-1",
                    "expiresAt": "2099-01-01T00:00:00Z",
                },
            )
        )
        client = _client(transport)

        handle = await client.create_session("ch-1", "EMDR Foundations", 120, course_id="course-1")

        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/conversation-sessions"
        assert request.headers["Authorization"] == "Bearer token-1"
        assert transport.json_bodies() == [
            {
                "chapterId": "ch-1",
                "chapterTitle": "EMDR Foundations",
                "courseId": "course-1",
                "timeLimit": 120,
            }
        ]
        assert handle.conversation_url == "https://tavus.daily.co/c-1"
        assert handle.conversation_id == "c-1"
        assert handle.expires_at is not None

    @pytest.mark.asyncio
    async def test_create_should_omit_optional_fields(self, recording_transport) -> None:
        transport = recording_transport(
            lambda request: httpx.Response(
                200, json={"conversationUrl": "https://u", "conversationId": "c-2"}
            )
        )
        client = _client(transport, token=None)

        handle = await client.create_session("ch-1", "Intro")

        assert transport.json_bodies() == [{"chapterId": "ch-1", "chapterTitle": "Intro"}]
        assert "Authorization" not in transport.requests[0].headers
        assert handle.expires_at is None

    @pytest.mark.asyncio
    async def test_create_should_forward_correlation_id(self, recording_transport) -> None:
        transport = recording_transport(
            lambda request: httpx.Response(
                200, json={"conversationUrl": "https://u", "conversationId": "c-3"}
            )
        )
        client = _client(transport)
        set_correlation_id("corr-7")
        try:
            await client.create_session("ch-1", "Intro")
        finally:
            clear_correlation_id()

        assert transport.requests[0].headers["X-Correlation-ID"] == "corr-7"

    @pytest.mark.asyncio
    async def test_create_should_surface_server_error_message(self, recording_transport) -> None:
        transport = recording_transport(
            lambda request: httpx.Response(429, json={"error": "quota exceeded"})
        )
        client = _client(transport)

        with pytest.raises(SessionCreationError) as exc_info:
            await client.create_session("ch-1", "Intro")

        assert exc_info.value.message == "quota exceeded"
        assert exc_info.value.status_code == 429
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_create_should_fall_back_without_error_body(self, recording_transport) -> None:
        transport = recording_transport(lambda request: httpx.Response(500, text="<html>oops</html>"))
        client = _client(transport)

        with pytest.raises(SessionCreationError) as exc_info:
            await client.create_session("ch-1", "Intro")

        assert exc_info.value.message == DEFAULT_CREATE_ERROR
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_create_should_report_unreachable_server(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(httpx.MockTransport(handler))

        with pytest.raises(SessionCreationError) as exc_info:
            await client.create_session("ch-1", "Intro")

        assert exc_info.value.message == UNREACHABLE_ERROR
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"conversationId": "c-1"},
            {"conversationUrl": "", "conversationId": "c-1"},
            ["not", "an", "object"],
        ],
    )
    async def test_create_should_reject_malformed_success_body(
        self, recording_transport, body
    ) -> None:
        transport = recording_transport(lambda request: httpx.Response(200, json=body))
        client = _client(transport)

        with pytest.raises(SessionCreationError) as exc_info:
            await client.create_session("ch-1", "Intro")

        assert exc_info.value.message == DEFAULT_CREATE_ERROR

    @pytest.mark.asyncio
    async def test_create_should_ignore_out_of_range_expiry(self, recording_transport) -> None:
        transport = recording_transport(
            lambda request: httpx.Response(
                200,
                json={"conversationUrl": "https://x", "conversationId": "abc", "expiresAt": 1e20},
            )
        )
        client = _client(transport)

        handle = await client.create_session("ch-1", "Intro")

        assert handle.conversation_id == "abc"
        assert handle.expires_at is None

    @pytest.mark.asyncio
    async def test_create_should_wrap_any_decoding_failure(
        self, recording_transport, monkeypatch
    ) -> None:
        def _fail_decode(*args, **kwargs):
            raise OverflowError("timestamp out of range for platform time_t")

        monkeypatch.setattr(
            "learning_check.client.session_client.ConversationHandle.model_validate",
            _fail_decode,
        )
        transport = recording_transport(
            lambda request: httpx.Response(
                200, json={"conversationUrl": "https://x", "conversationId": "abc"}
            )
        )
        client = _client(transport)

        with pytest.raises(SessionCreationError) as exc_info:
            await client.create_session("ch-1", "Intro")

        assert exc_info.value.message == DEFAULT_CREATE_ERROR
        assert exc_info.value.status_code == 200


class TestEndSession:
    """Test suite for ConversationSessionClient.end_session."""

    @pytest.mark.asyncio
    async def test_end_should_post_to_end_route(self, recording_transport) -> None:
        transport = recording_transport(lambda request: httpx.Response(200, json={"success": True}))
        client = _client(transport)

        await client.end_session("c-1")

        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{BASE_URL}/conversation-sessions/c-1/end"

    @pytest.mark.asyncio
    async def test_end_should_swallow_error_status(self, recording_transport, caplog) -> None:
        transport = recording_transport(
            lambda request: httpx.Response(401, json={"error": "Invalid access token"})
        )
        client = _client(transport)

        with caplog.at_level(logging.WARNING, logger="learning_check.client.session_client"):
            await client.end_session("c-1")

        assert "Invalid access token" in caplog.text

    @pytest.mark.asyncio
    async def test_end_should_swallow_transport_errors(self, caplog) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = _client(httpx.MockTransport(handler))

        with caplog.at_level(logging.ERROR, logger="learning_check.client.session_client"):
            await client.end_session("c-1")

        assert "End conversation failed: ReadTimeout" in caplog.text


class TestLifecycle:
    """Test suite for client ownership of the HTTP connection pool."""

    @pytest.mark.asyncio
    async def test_aclose_should_leave_injected_client_open(self) -> None:
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200))
        )
        async with ConversationSessionClient(BASE_URL, http_client=http_client):
            pass

        assert http_client.is_closed is False
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_aclose_should_close_owned_client(self) -> None:
        client = ConversationSessionClient(BASE_URL)

        await client.aclose()

        assert client._client.is_closed is True

    @pytest.mark.asyncio
    async def test_from_settings_should_use_configured_base_url(self) -> None:
        settings = ClientSettings(api_base_url="http://api.test/api/v1/", _env_file=None)

        client = ConversationSessionClient.from_settings(settings, access_token="t")

        assert client._base_url == BASE_URL
        assert client._headers()["Authorization"] == "Bearer t"
        await client.aclose()

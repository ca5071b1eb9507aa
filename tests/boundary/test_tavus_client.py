"""
Test suite for TavusClient.

Uses httpx.MockTransport in place of the Tavus API to verify request
shape, authentication header, and error conversion.

System role: Verification of the Tavus boundary
"""

import httpx
import pytest

from learning_check.boundary.tavus import TavusClient
from learning_check.core.exceptions import ConfigurationError, TavusAPIError


def _client(transport: httpx.AsyncBaseTransport, api_key: str | None = "k-123") -> TavusClient:
    return TavusClient(api_key=api_key, base_url="https://tavus.test/v2", transport=transport)


class TestTavusClientRequests:
    """Request shape for each Tavus operation."""

    @pytest.mark.asyncio
    async def test_create_conversation_should_post_payload_with_api_key(
        self, recording_transport
    ) -> None:
        transport = recording_transport(
            lambda request: httpx.Response(
                200,
                json={"conversation_id": "c-1", "conversation_url": "https://tavus.daily.co/c-1"},
            )
        )
        client = _client(transport)

        data = await client.create_conversation({"persona_id": "p-1"})

        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://tavus.test/v2/conversations"
        assert request.headers["x-api-key"] == "k-123"
        assert transport.json_bodies() == [{"persona_id": "p-1"}]
        assert data["conversation_id"] == "c-1"
        await client.aclose()

    @pytest.mark.asyncio
    async def test_end_and_delete_should_target_conversation(self, recording_transport) -> None:
        transport = recording_transport(lambda request: httpx.Response(200))
        client = _client(transport)

        assert await client.end_conversation("c-9") == {}
        await client.delete_conversation("c-9")

        assert [(r.method, r.url.path) for r in transport.requests] == [
            ("POST", "/v2/conversations/c-9/end"),
            ("DELETE", "/v2/conversations/c-9"),
        ]
        await client.aclose()

    @pytest.mark.asyncio
    async def test_update_persona_should_send_json_patch(self, recording_transport) -> None:
        transport = recording_transport(
            lambda request: httpx.Response(200, json={"persona_id": "p-1"})
        )
        client = _client(transport)
        operations = [{"op": "add", "path": "/guardrails_id", "value": "g-1"}]

        await client.update_persona("p-1", operations)

        assert transport.requests[0].method == "PATCH"
        assert transport.requests[0].url.path == "/v2/personas/p-1"
        assert transport.json_bodies() == [operations]
        await client.aclose()


class TestTavusClientErrors:
    """Error conversion."""

    @pytest.mark.asyncio
    async def test_missing_api_key_should_raise_configuration_error(
        self, recording_transport
    ) -> None:
        transport = recording_transport(lambda request: httpx.Response(200))
        client = _client(transport, api_key=None)

        assert client.is_configured is False
        with pytest.raises(ConfigurationError):
            await client.create_conversation({})
        assert transport.requests == []
        await client.aclose()

    @pytest.mark.asyncio
    async def test_error_status_should_raise_with_payload(self, recording_transport) -> None:
        transport = recording_transport(
            lambda request: httpx.Response(429, json={"error": "quota exceeded"})
        )
        client = _client(transport)

        with pytest.raises(TavusAPIError) as exc_info:
            await client.create_conversation({})

        assert exc_info.value.status_code == 429
        assert exc_info.value.payload == {"error": "quota exceeded"}
        await client.aclose()

    @pytest.mark.asyncio
    async def test_non_json_error_body_should_give_empty_payload(
        self, recording_transport
    ) -> None:
        transport = recording_transport(lambda request: httpx.Response(500, text="oops"))
        client = _client(transport)

        with pytest.raises(TavusAPIError) as exc_info:
            await client.end_conversation("c-1")

        assert exc_info.value.payload == {}
        await client.aclose()

    @pytest.mark.asyncio
    async def test_transport_failure_should_raise_502(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(httpx.MockTransport(handler))

        with pytest.raises(TavusAPIError) as exc_info:
            await client.create_conversation({})

        assert exc_info.value.status_code == 502
        await client.aclose()

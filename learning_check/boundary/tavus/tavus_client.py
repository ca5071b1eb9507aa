"""
Tavus API client.

Thin async wrapper over the Tavus v2 REST API used by learning checks:
conversations, guardrails, objectives and personas. The API key never
leaves the server.

Dependencies: httpx
System role: Conversational video provider boundary
"""

import logging
from typing import Any

import httpx

from learning_check.core.exceptions import ConfigurationError, TavusAPIError

logger = logging.getLogger(__name__)


class TavusClient:
    """Async client for the Tavus Conversational Video Interface API."""

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://tavusapi.com/v2",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize Tavus client.

        Args:
            api_key: Tavus API key; calls raise ConfigurationError when missing
            base_url: Tavus API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            transport=transport,
        )

    @property
    def is_configured(self) -> bool:
        """Return True when an API key is available."""
        return bool(self._api_key)

    def _headers(self) -> dict[str, str]:
        if not self._api_key:
            raise ConfigurationError(
                "Tavus API key not configured",
                missing=["TAVUS_API_KEY"],
            )
        return {"x-api-key": self._api_key}

    async def _request(
        self,
        method: str,
        path: str,
        json: Any = None,
    ) -> dict[str, Any]:
        """
        Send a request and decode the JSON body.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            json: Optional JSON body

        Returns:
            dict: Decoded body, empty when the response has no JSON object

        Raises:
            ConfigurationError: If no API key is configured
            TavusAPIError: On non-2xx status or transport failure
        """
        headers = self._headers()
        try:
            response = await self._client.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.error(
                f"Tavus API unreachable: {method} {path}",
                extra={"error_type": type(e).__name__, "error_msg": str(e)},
            )
            raise TavusAPIError(
                f"Tavus API unreachable: {type(e).__name__}",
                status_code=502,
            ) from e

        payload = _decode_json(response)

        if response.is_error:
            logger.error(
                f"Tavus API error: {method} {path} - {response.status_code}",
                extra={
                    "status_code": response.status_code,
                    "reason_phrase": response.reason_phrase,
                    "error": payload,
                },
            )
            raise TavusAPIError(
                f"Tavus API returned {response.status_code}",
                status_code=response.status_code,
                payload=payload,
            )

        return payload

    async def create_conversation(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Create a conversation. Returns the Tavus conversation object."""
        return await self._request("POST", "/conversations", json=payload)

    async def end_conversation(self, conversation_id: str) -> dict[str, Any]:
        """End a conversation gracefully (the participant leaves, billing stops)."""
        return await self._request("POST", f"/conversations/{conversation_id}/end")

    async def delete_conversation(self, conversation_id: str) -> dict[str, Any]:
        """Delete a conversation outright."""
        return await self._request("DELETE", f"/conversations/{conversation_id}")

    async def create_guardrails(self, guardrails: dict[str, Any]) -> dict[str, Any]:
        """Create a guardrails document from {"name", "data"}."""
        return await self._request("POST", "/guardrails", json=guardrails)

    async def create_objectives(self, objectives: dict[str, Any]) -> dict[str, Any]:
        """Create an objectives document from {"name", "data"}."""
        return await self._request("POST", "/objectives", json=objectives)

    async def update_persona(
        self,
        persona_id: str,
        operations: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """Apply JSON Patch operations to a persona."""
        return await self._request("PATCH", f"/personas/{persona_id}", json=operations)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()


def _decode_json(response: httpx.Response) -> dict[str, Any]:
    """Decode a JSON object body, returning {} for empty or non-object bodies."""
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}

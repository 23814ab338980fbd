"""Shared httpx plumbing for the REST backends."""

import logging
from typing import Any

import httpx

from ..base import BackendClient

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "Notiva/1.0"


class HttpBackendClient(BackendClient):
    """Owns one ``httpx.AsyncClient`` for a base URL.

    Args:
        base_url: Service root, requests use paths relative to it
        timeout: Connect/read/write timeout in seconds
        user_agent: Sent with every request
        transport: Optional custom transport (e.g. ``httpx.MockTransport``)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
        **client_kwargs: Any,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
            transport=transport,
            **client_kwargs,
        )

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        response = await self._client.get(path, params=params)
        if not response.is_success:
            logger.warning(
                "%s %s returned HTTP %d: %s",
                response.request.method, response.request.url,
                response.status_code, response.text[:200],
            )
        return response

    async def close(self) -> None:
        await self._client.aclose()

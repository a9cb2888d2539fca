"""Transport backed by httpx."""

from __future__ import annotations

import logging

import httpx

from meilirest.transport.base import (
    AbstractTransport,
    ResponseMeta,
    TransportRequest,
    TransportResponse,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class HttpxTransport(AbstractTransport):
    """
    Transport that delegates to an ``httpx.AsyncClient``.

    The client is created lazily on first use. A client passed in by the
    caller is used as is and is not closed by this transport.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
            )
            self._owns_client = True
        return self._client

    async def execute(self, request: TransportRequest) -> TransportResponse:
        client = self._get_client()

        try:
            response = await client.request(
                request.method.value,
                request.url,
                content=request.body,
                headers=request.headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"{request.method} {request.url} failed: {e!r}")
            return TransportResponse(error=e)

        return TransportResponse(
            data=response.content or None,
            response=ResponseMeta(
                status_code=response.status_code,
                headers=dict(response.headers),
            ),
        )

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

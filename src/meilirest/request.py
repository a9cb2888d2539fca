"""Request client issuing REST calls through a transport."""

from __future__ import annotations

import asyncio
import logging
import threading

from meilirest.config import Config
from meilirest.core.exceptions import MeiliSearchApiError
from meilirest.core.result import Failure, Result, Success
from meilirest.core.types import HttpMethod
from meilirest.transport import (
    AbstractTransport,
    HttpxTransport,
    TransportRequest,
    TransportResponse,
)
from meilirest.transport.httpx_transport import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class Request:
    """
    Issues GET/POST/PUT/DELETE calls against the configured host.

    Every call returns exactly one ``Result``:

    - a transport error becomes ``Failure(error)``, whatever body came with it
    - an error status becomes ``Failure(MeiliSearchApiError)``; this check runs
      before any decoding, so an error body never reaches a decoder
    - GET and DELETE succeed with the body, or ``None`` when it is empty
    - POST and PUT succeed with the body, or ``b""`` when it is empty

    Nothing is retried.
    """

    def __init__(self, config: Config) -> None:
        self._config = config
        self._transport = config.transport

    @property
    def config(self) -> Config:
        return self._config

    @property
    def transport(self) -> AbstractTransport:
        return self._transport

    async def get(self, api: str, param: str | None = None) -> Result[bytes | None]:
        """
        Send a GET request.

        Args:
            api: API path, e.g. ``/keys``
            param: Query string appended verbatim (callers must pre-encode it)
        """
        url = self._config.url(api)
        if param:
            url += param

        exchange = await self._send(HttpMethod.GET, url)
        if (failure := self._failure(exchange)) is not None:
            return failure
        return Success(exchange.data)

    async def post(self, api: str, body: bytes) -> Result[bytes]:
        """Send a POST request with a JSON body."""
        exchange = await self._send(HttpMethod.POST, self._config.url(api), body)
        if (failure := self._failure(exchange)) is not None:
            return failure
        return self._with_payload(HttpMethod.POST, api, exchange)

    async def put(self, api: str, body: bytes) -> Result[bytes]:
        """Send a PUT request with a JSON body."""
        exchange = await self._send(HttpMethod.PUT, self._config.url(api), body)
        if (failure := self._failure(exchange)) is not None:
            return failure
        return self._with_payload(HttpMethod.PUT, api, exchange)

    async def delete(self, api: str) -> Result[bytes | None]:
        """Send a DELETE request."""
        exchange = await self._send(HttpMethod.DELETE, self._config.url(api))
        if (failure := self._failure(exchange)) is not None:
            return failure
        return Success(exchange.data)

    async def _send(
        self,
        method: HttpMethod,
        url: str,
        body: bytes | None = None,
    ) -> TransportResponse:
        logger.debug(f"{method} {url}")
        return await self._transport.execute(
            TransportRequest(
                method=method,
                url=url,
                body=body,
                headers=self._config.headers(),
            )
        )

    def _failure(self, exchange: TransportResponse) -> Failure | None:
        """Map a transport error or an error status to a failure."""
        if exchange.error is not None:
            return Failure(exchange.error)

        if exchange.response is not None and exchange.response.is_error:
            error = MeiliSearchApiError.from_response(exchange.response.status_code, exchange.data)
            logger.warning(str(error))
            return Failure(error)

        return None

    def _with_payload(
        self,
        method: HttpMethod,
        api: str,
        exchange: TransportResponse,
    ) -> Result[bytes]:
        if exchange.data is None:
            logger.warning(f"{method} {api} succeeded without a response body")
            return Success(b"")
        return Success(exchange.data)


def pong(
    url: str,
    transport: AbstractTransport | None = None,
    timeout: float | None = None,
    request_timeout: float = DEFAULT_TIMEOUT,
) -> bool:
    """
    Synchronously probe a URL.

    Blocks the calling thread until the GET completes and returns whether
    the transport reported no error. The request runs on a worker thread
    with its own event loop, so this can be called from any thread,
    including one that is running an event loop.

    Args:
        url: Absolute URL to probe
        transport: Transport to use (a fresh ``HttpxTransport`` if omitted)
        timeout: Seconds to wait before giving up; ``None`` waits forever
        request_timeout: Request timeout of the fresh transport
    """
    done = threading.Event()
    outcome: dict[str, bool] = {"success": False}

    async def probe() -> None:
        if transport is not None:
            exchange = await transport.execute(TransportRequest(HttpMethod.GET, url))
        else:
            async with HttpxTransport(timeout=request_timeout) as own:
                exchange = await own.execute(TransportRequest(HttpMethod.GET, url))
        outcome["success"] = exchange.error is None

    def run() -> None:
        try:
            asyncio.run(probe())
        except Exception as e:
            logger.warning(f"Ping to {url} failed: {e!r}")
        finally:
            done.set()

    threading.Thread(target=run, name="meilirest-ping", daemon=True).start()
    if not done.wait(timeout):
        logger.warning(f"Ping to {url} timed out after {timeout}s")
        return False
    return outcome["success"]

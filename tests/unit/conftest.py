"""Unit test fixtures with transport and HTTP mocking."""

from __future__ import annotations

import json
from typing import Any

import pytest
import respx

from meilirest.client import MeiliSearch
from meilirest.config import Config
from meilirest.request import Request
from meilirest.transport import (
    AbstractTransport,
    ResponseMeta,
    TransportRequest,
    TransportResponse,
)

HOST = "http://localhost:7700"


# ============================================================================
# Fake Transport
# ============================================================================


class FakeTransport(AbstractTransport):
    """
    Transport returning canned responses without network access.

    Responses are keyed by (method, url). Requests without a canned
    response get an empty 200. Every executed request is recorded.
    """

    def __init__(self) -> None:
        self.requests: list[TransportRequest] = []
        self.closed = False
        self._responses: dict[tuple[str, str], TransportResponse] = {}

    def respond(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        data: bytes | None = None,
        status: int | None = 200,
        error: BaseException | None = None,
    ) -> None:
        """Register the response for a request."""
        if json_body is not None:
            data = json.dumps(json_body).encode()
        self._responses[(method, f"{HOST}{path}")] = TransportResponse(
            data=data,
            response=ResponseMeta(status_code=status) if status is not None else None,
            error=error,
        )

    async def execute(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        return self._responses.get(
            (request.method.value, request.url),
            TransportResponse(response=ResponseMeta(status_code=200)),
        )

    async def close(self) -> None:
        self.closed = True

    @property
    def last_request(self) -> TransportRequest:
        return self.requests[-1]


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Provide a fresh fake transport."""
    return FakeTransport()


@pytest.fixture
def config(fake_transport: FakeTransport) -> Config:
    """Configuration using the fake transport."""
    return Config.create(HOST, api_key="test-master-key", transport=fake_transport)


@pytest.fixture
def request_client(config: Config) -> Request:
    """Request client using the fake transport."""
    return Request(config)


@pytest.fixture
def client(fake_transport: FakeTransport) -> MeiliSearch:
    """Facade using the fake transport."""
    return MeiliSearch(HOST, "test-master-key", transport=fake_transport)


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router

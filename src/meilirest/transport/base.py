"""Abstract transport that performs the actual network I/O."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from meilirest.core.types import HttpMethod


@dataclass(frozen=True)
class TransportRequest:
    """Description of a single HTTP request."""

    method: HttpMethod
    url: str
    body: bytes | None = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ResponseMeta:
    """Protocol-level metadata of a response."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return self.status_code >= 400


@dataclass(frozen=True)
class TransportResponse:
    """
    What a transport reports back for a request.

    Any combination of the three fields may be set; interpreting them is
    left to the caller. An empty body is reported as ``data=None``.
    """

    data: bytes | None = None
    response: ResponseMeta | None = None
    error: BaseException | None = None


class AbstractTransport(ABC):
    """
    Abstract base class for transports.

    A transport executes one request and reports exactly one
    ``TransportResponse`` for it. Transport failures are reported through
    ``TransportResponse.error`` and are never raised, so a test double can
    substitute canned bytes or forced errors without network access.
    """

    @abstractmethod
    async def execute(self, request: TransportRequest) -> TransportResponse:
        """
        Execute a request.

        Args:
            request: The request to send

        Returns:
            Body, response metadata and error of the exchange
        """
        ...

    async def close(self) -> None:
        """Release any held resources."""
        return None

    async def __aenter__(self) -> "AbstractTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

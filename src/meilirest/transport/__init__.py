"""Pluggable network layer."""

from meilirest.transport.base import (
    AbstractTransport,
    ResponseMeta,
    TransportRequest,
    TransportResponse,
)
from meilirest.transport.httpx_transport import HttpxTransport

__all__ = [
    "AbstractTransport",
    "HttpxTransport",
    "ResponseMeta",
    "TransportRequest",
    "TransportResponse",
]

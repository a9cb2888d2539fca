"""Base class for clients wrapping a group of server endpoints."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from meilirest.core.exceptions import DataNotFoundError, DecodingError
from meilirest.core.result import Failure, Result, Success
from meilirest.request import Request

T = TypeVar("T")

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


class ResourceClient:
    """
    Base class for resource clients.

    Holds a shared reference to the ``Request`` client and turns its raw
    results into typed records:

    1. a failure is forwarded unchanged
    2. a success without a body fails with ``DataNotFoundError``
    3. a body is decoded strictly into the target type, a decoding failure
       is reported as ``DecodingError``
    """

    def __init__(self, request: Request) -> None:
        self.request = request

    def _decode(self, result: Result[bytes | None], target: type[T]) -> Result[T]:
        """Decode a raw result into ``target``."""
        if isinstance(result, Failure):
            return result

        data = result.value
        if not data:
            return Failure(DataNotFoundError())

        try:
            return Success(_adapter(target).validate_json(data))
        except ValidationError as e:
            logger.warning(f"Failed to decode {getattr(target, '__name__', target)}: {e}")
            return Failure(DecodingError(target, e))

    @staticmethod
    def _encode(payload: dict[str, Any]) -> bytes:
        """Encode a request body, dropping unset values."""
        return json.dumps({k: v for k, v in payload.items() if v is not None}).encode()

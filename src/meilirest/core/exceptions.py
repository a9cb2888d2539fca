"""Custom exception hierarchy for meilirest."""

from __future__ import annotations

import json
from typing import Any


class MeiliSearchError(Exception):
    """Base exception for all meilirest errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(MeiliSearchError):
    """Client configuration is invalid."""

    pass


class DataNotFoundError(MeiliSearchError):
    """A successful response carried no body where one was required."""

    def __init__(
        self,
        message: str = "Response contained no data",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class DecodingError(MeiliSearchError):
    """Response body could not be decoded into the expected type."""

    def __init__(
        self,
        target: Any,
        cause: Exception,
        details: dict[str, Any] | None = None,
    ) -> None:
        name = getattr(target, "__name__", None) or repr(target)
        super().__init__(f"Failed to decode {name}: {cause}", details)
        self.target = target
        self.cause = cause


class MeiliSearchApiError(MeiliSearchError):
    """The server answered with an error status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: str | None = None,
        error_type: str | None = None,
        link: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
        self.code = code
        self.error_type = error_type
        self.link = link

    @classmethod
    def from_response(cls, status_code: int, body: bytes | None) -> MeiliSearchApiError:
        """
        Build an API error from an error response body.

        Both the current (``code``/``type``/``link``) and the legacy
        (``errorCode``/``errorType``/``errorLink``) field names are understood.
        """
        if not body:
            return cls(f"HTTP {status_code}", status_code)

        try:
            payload = json.loads(body)
        except ValueError:
            return cls(body.decode("utf-8", errors="replace"), status_code)

        if not isinstance(payload, dict):
            return cls(str(payload), status_code)

        return cls(
            message=payload.get("message") or f"HTTP {status_code}",
            status_code=status_code,
            code=payload.get("code") or payload.get("errorCode"),
            error_type=payload.get("type") or payload.get("errorType"),
            link=payload.get("link") or payload.get("errorLink"),
            details=payload,
        )

    def __str__(self) -> str:
        if self.code:
            return f"MeiliSearchApiError. Error code: {self.code}. Error message: {self.message}"
        return f"MeiliSearchApiError. Status code: {self.status_code}. Error message: {self.message}"

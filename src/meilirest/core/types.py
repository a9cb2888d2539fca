"""Core enums and type definitions."""

from enum import StrEnum


class HttpMethod(StrEnum):
    """HTTP methods used against the Meilisearch REST API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class DumpStatus(StrEnum):
    """Status of a dump creation process."""

    IN_PROGRESS = "in_progress"
    FAILED = "failed"
    DONE = "done"


class HealthStatus(StrEnum):
    """Health status reported by the server."""

    AVAILABLE = "available"

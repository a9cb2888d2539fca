"""Core types, results, records and exceptions."""

from .exceptions import (
    ConfigurationError,
    DataNotFoundError,
    DecodingError,
    MeiliSearchApiError,
    MeiliSearchError,
)
from .models import AllStats, Dump, Health, IndexMetadata, IndexStats, Key, Version
from .result import Failure, Result, Success
from .types import DumpStatus, HealthStatus, HttpMethod

__all__ = [
    "AllStats",
    "ConfigurationError",
    "DataNotFoundError",
    "DecodingError",
    "Dump",
    "DumpStatus",
    "Failure",
    "Health",
    "HealthStatus",
    "HttpMethod",
    "IndexMetadata",
    "IndexStats",
    "Key",
    "MeiliSearchApiError",
    "MeiliSearchError",
    "Result",
    "Success",
    "Version",
]

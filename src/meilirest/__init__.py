"""Meilirest - Meilisearch REST client."""

import logging

from meilirest.client import MeiliSearch
from meilirest.config import Config, MeiliSearchSettings, configure_logging, get_settings
from meilirest.core.exceptions import (
    ConfigurationError,
    DataNotFoundError,
    DecodingError,
    MeiliSearchApiError,
    MeiliSearchError,
)
from meilirest.core.models import AllStats, Dump, Health, IndexMetadata, IndexStats, Key, Version
from meilirest.core.result import Failure, Result, Success
from meilirest.core.types import DumpStatus
from meilirest.transport import AbstractTransport, HttpxTransport

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Client
    "MeiliSearch",
    # Configuration
    "Config",
    "MeiliSearchSettings",
    "configure_logging",
    "get_settings",
    # Transport
    "AbstractTransport",
    "HttpxTransport",
    # Results
    "Failure",
    "Result",
    "Success",
    # Models
    "AllStats",
    "Dump",
    "DumpStatus",
    "Health",
    "IndexMetadata",
    "IndexStats",
    "Key",
    "Version",
    # Errors
    "ConfigurationError",
    "DataNotFoundError",
    "DecodingError",
    "MeiliSearchApiError",
    "MeiliSearchError",
    # Version
    "__version__",
]

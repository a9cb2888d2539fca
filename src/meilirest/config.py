"""Client configuration."""

from __future__ import annotations

import logging
from functools import lru_cache

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from meilirest.core.exceptions import ConfigurationError
from meilirest.transport import AbstractTransport, HttpxTransport
from meilirest.transport.httpx_transport import DEFAULT_TIMEOUT


class MeiliSearchSettings(BaseSettings):
    """Client configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="MEILISEARCH_",
        extra="ignore",
    )

    host: str = Field(
        default="http://localhost:7700",
        description="Meilisearch server URL",
    )
    api_key: str | None = Field(
        default=None,
        description="Meilisearch API key",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0.0,
        description="Request timeout in seconds",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> MeiliSearchSettings:
    """Get cached settings instance."""
    return MeiliSearchSettings()


def configure_logging(level: str | int | None = None) -> None:
    """Configure the ``meilirest`` logger for applications."""
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("meilirest")
    logger.setLevel(level)
    if not any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)


class Config(BaseModel):
    """
    Immutable client configuration.

    Holds the server host, the optional API key and the transport every
    request goes through. To change it, create a new client.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    host: str = Field(..., description="Meilisearch server URL")
    api_key: str | None = Field(default=None, description="API key sent as bearer token")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0, description="Request timeout")
    transport: AbstractTransport = Field(..., description="Transport used for requests")

    @field_validator("host")
    @classmethod
    def _validate_host(cls, value: str) -> str:
        value = value.strip()
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid host {value!r}: {e}") from e

        if url.scheme not in ("http", "https"):
            raise ValueError(f"Invalid host {value!r}: scheme must be http or https")
        if not url.host:
            raise ValueError(f"Invalid host {value!r}: missing host name")
        return value.rstrip("/")

    @classmethod
    def create(
        cls,
        host: str,
        api_key: str | None = None,
        transport: AbstractTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> Config:
        """
        Build and validate a configuration.

        Raises:
            ConfigurationError: If the host or timeout is invalid
        """
        try:
            return cls(
                host=host,
                api_key=api_key,
                timeout=timeout,
                transport=transport or HttpxTransport(timeout=timeout),
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.errors()[0]['msg']}",
                details={"host": host},
            ) from e

    def url(self, api: str) -> str:
        """Absolute URL of an API path."""
        return f"{self.host}{api}"

    def headers(self) -> dict[str, str]:
        """Headers attached to every request."""
        headers = {
            "Content-Type": "application/json",
            "User-Agent": "meilirest/0.1.0",
        }
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

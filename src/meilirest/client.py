"""Main library client."""

from __future__ import annotations

import logging

from meilirest.config import Config, MeiliSearchSettings, get_settings
from meilirest.core.models import AllStats, Dump, Health, IndexMetadata, Key, Version
from meilirest.core.result import Result, Success
from meilirest.request import Request, pong
from meilirest.resources import Dumps, Index, Indexes, Keys, Stats, System
from meilirest.transport import AbstractTransport
from meilirest.transport.httpx_transport import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class MeiliSearch:
    """
    Client for a Meilisearch server.

    Usage:
        async with MeiliSearch("http://localhost:7700", "masterKey") as client:
            result = await client.version()
            if result.is_success:
                print(result.value.pkg_version)

            # Index-scoped operations
            result = await client.index("movies").get()

    Every operation returns a ``Result``; failures (transport errors, API
    errors, missing data, decoding errors) are never raised. The
    configuration is fixed at construction, create a new client to change
    it. Instances hold no mutable state and can be shared between tasks.
    """

    def __init__(
        self,
        host: str,
        api_key: str | None = None,
        transport: AbstractTransport | None = None,
        request: Request | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the client.

        Args:
            host: URL of the Meilisearch server
            api_key: Key used to authenticate requests
            transport: Custom transport (an ``HttpxTransport`` if omitted)
            request: Custom request client, overrides the one built from the configuration
            timeout: Request timeout in seconds for the default transport

        Raises:
            ConfigurationError: If the host is not a valid http(s) URL
        """
        self._config = Config.create(host, api_key=api_key, transport=transport, timeout=timeout)
        self._request = request or Request(self._config)
        self._keys = Keys(self._request)
        self._stats = Stats(self._request)
        self._system = System(self._request)
        self._dumps = Dumps(self._request)
        self._indexes = Indexes(self._request)

    @classmethod
    def from_settings(
        cls,
        settings: MeiliSearchSettings | None = None,
        transport: AbstractTransport | None = None,
    ) -> MeiliSearch:
        """Create a client from settings (loaded from environment if omitted)."""
        settings = settings or get_settings()
        return cls(
            settings.host,
            settings.api_key,
            transport=transport,
            timeout=settings.timeout,
        )

    @property
    def config(self) -> Config:
        """The immutable configuration of this client."""
        return self._config

    async def close(self) -> None:
        """Close the transport."""
        await self._request.transport.close()

    async def __aenter__(self) -> MeiliSearch:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # Indexes

    def index(self, uid: str) -> Index:
        """
        Client scoped to one index.

        No request is made; the index may not exist yet.
        """
        return self._indexes.index(uid)

    async def create_index(
        self,
        uid: str,
        primary_key: str | None = None,
    ) -> Result[IndexMetadata]:
        """
        Create a new index.

        Args:
            uid: Unique identifier of the index
            primary_key: Unique field of a document
        """
        return await self._indexes.create(uid, primary_key)

    async def get_or_create_index(
        self,
        uid: str,
        primary_key: str | None = None,
    ) -> Result[IndexMetadata]:
        """Get an index, creating it first if it does not exist."""
        return await self._indexes.get_or_create(uid, primary_key)

    async def get_index(self, uid: str) -> Result[IndexMetadata]:
        """Get an index."""
        return await self.index(uid).get()

    async def get_indexes(self) -> Result[list[IndexMetadata]]:
        """List all indexes."""
        return await self._indexes.get_all()

    async def update_index(self, uid: str, primary_key: str) -> Result[IndexMetadata]:
        """Update the primary key of an index."""
        return await self.index(uid).update(primary_key)

    async def delete_index(self, uid: str) -> Result[None]:
        """Delete an index."""
        return await self.index(uid).delete()

    # Keys

    async def keys(self) -> Result[Key]:
        """
        Get the API key.

        Only the master key has the right to access the keys route.
        """
        return await self._keys.get()

    # Stats

    async def all_stats(self) -> Result[AllStats]:
        """Get stats of all indexes."""
        return await self._stats.all_stats()

    # System

    async def health(self) -> Result[Health]:
        """Get health of the server."""
        return await self._system.health()

    async def is_healthy(self) -> bool:
        """
        Whether the server is healthy.

        Any failure of the health check, whatever its kind, counts as unhealthy.
        """
        result = await self.health()
        if not isinstance(result, Success):
            logger.info(f"Health check failed: {result.error}")
            return False
        return True

    async def version(self) -> Result[Version]:
        """Get version of the server."""
        return await self._system.version()

    def ping(self, timeout: float | None = None) -> bool:
        """
        Synchronously check that the server answers.

        Blocks the calling thread until the probe completes. Uses a fresh
        transport, so it is safe to call from inside a running event loop.
        """
        return pong(
            self._config.url("/health"),
            timeout=timeout,
            request_timeout=self._config.timeout,
        )

    # Dumps

    async def create_dump(self) -> Result[Dump]:
        """
        Trigger a dump creation process.

        The returned ``Dump`` carries the ``uid`` used to check its status.
        """
        return await self._dumps.create()

    async def get_dump_status(self, uid: str) -> Result[Dump]:
        """
        Get the status of a dump creation process.

        The status is one of ``DumpStatus.IN_PROGRESS``, ``DumpStatus.FAILED``
        or ``DumpStatus.DONE``.
        """
        return await self._dumps.status(uid)

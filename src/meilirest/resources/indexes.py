"""Index lifecycle."""

from __future__ import annotations

import logging

from meilirest.core.exceptions import MeiliSearchApiError
from meilirest.core.models import IndexMetadata, IndexStats
from meilirest.core.result import Failure, Result, Success
from meilirest.request import Request
from meilirest.resources.base import ResourceClient

logger = logging.getLogger(__name__)

INDEX_ALREADY_EXISTS = "index_already_exists"


class Index(ResourceClient):
    """
    Client scoped to a single index.

    The index itself lives on the server; this object only carries its
    ``uid`` and may refer to an index that does not exist yet.
    """

    def __init__(self, request: Request, uid: str) -> None:
        super().__init__(request)
        self.uid = uid

    @property
    def _path(self) -> str:
        return f"/indexes/{self.uid}"

    async def get(self) -> Result[IndexMetadata]:
        """Get the index metadata."""
        return self._decode(await self.request.get(self._path), IndexMetadata)

    async def update(self, primary_key: str) -> Result[IndexMetadata]:
        """Update the primary key of the index."""
        body = self._encode({"primaryKey": primary_key})
        return self._decode(await self.request.put(self._path, body), IndexMetadata)

    async def delete(self) -> Result[None]:
        """Delete the index. An empty response body is a success."""
        result = await self.request.delete(self._path)
        if isinstance(result, Failure):
            return result
        return Success(None)

    async def stats(self) -> Result[IndexStats]:
        """Get the index statistics."""
        return self._decode(await self.request.get(f"{self._path}/stats"), IndexStats)

    def __repr__(self) -> str:
        return f"Index(uid={self.uid!r})"


class Indexes(ResourceClient):
    """Client for the /indexes collection."""

    def index(self, uid: str) -> Index:
        """Client scoped to the index ``uid``."""
        return Index(self.request, uid)

    async def create(self, uid: str, primary_key: str | None = None) -> Result[IndexMetadata]:
        """Create an index."""
        body = self._encode({"uid": uid, "primaryKey": primary_key})
        return self._decode(await self.request.post("/indexes", body), IndexMetadata)

    async def get_all(self) -> Result[list[IndexMetadata]]:
        """List all indexes."""
        return self._decode(await self.request.get("/indexes"), list[IndexMetadata])

    async def get_or_create(
        self,
        uid: str,
        primary_key: str | None = None,
    ) -> Result[IndexMetadata]:
        """Create an index, or get it if it already exists."""
        result = await self.create(uid, primary_key)
        if (
            isinstance(result, Failure)
            and isinstance(result.error, MeiliSearchApiError)
            and result.error.code == INDEX_ALREADY_EXISTS
        ):
            logger.debug(f"Index {uid} already exists, fetching it")
            return await self.index(uid).get()
        return result

"""Instance and index statistics."""

from __future__ import annotations

from meilirest.core.models import AllStats, IndexStats
from meilirest.core.result import Result
from meilirest.resources.base import ResourceClient


class Stats(ResourceClient):
    """Client for the statistics routes."""

    async def all_stats(self) -> Result[AllStats]:
        """Get stats of all indexes."""
        return self._decode(await self.request.get("/stats"), AllStats)

    async def index_stats(self, uid: str) -> Result[IndexStats]:
        """Get stats of one index."""
        return self._decode(await self.request.get(f"/indexes/{uid}/stats"), IndexStats)

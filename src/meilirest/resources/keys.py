"""API keys."""

from __future__ import annotations

from meilirest.core.models import Key
from meilirest.core.result import Result
from meilirest.resources.base import ResourceClient


class Keys(ResourceClient):
    """Client for the /keys route."""

    async def get(self) -> Result[Key]:
        """Get the API key (requires the master key)."""
        return self._decode(await self.request.get("/keys"), Key)

"""Dump creation and status."""

from __future__ import annotations

from meilirest.core.models import Dump
from meilirest.core.result import Result
from meilirest.resources.base import ResourceClient


class Dumps(ResourceClient):
    """Client for the /dumps routes."""

    async def create(self) -> Result[Dump]:
        """Trigger a dump creation process."""
        return self._decode(await self.request.post("/dumps", b""), Dump)

    async def status(self, uid: str) -> Result[Dump]:
        """Get the status of a dump creation process."""
        return self._decode(await self.request.get(f"/dumps/{uid}/status"), Dump)

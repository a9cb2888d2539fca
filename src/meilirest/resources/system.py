"""Server health and version."""

from __future__ import annotations

from meilirest.core.models import Health, Version
from meilirest.core.result import Result
from meilirest.resources.base import ResourceClient


class System(ResourceClient):
    async def health(self) -> Result[Health]:
        return self._decode(await self.request.get("/health"), Health)

    async def version(self) -> Result[Version]:
        return self._decode(await self.request.get("/version"), Version)

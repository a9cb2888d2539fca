"""Clients wrapping groups of server endpoints."""

from meilirest.resources.base import ResourceClient
from meilirest.resources.dumps import Dumps
from meilirest.resources.indexes import Index, Indexes
from meilirest.resources.keys import Keys
from meilirest.resources.stats import Stats
from meilirest.resources.system import System

__all__ = [
    "Dumps",
    "Index",
    "Indexes",
    "Keys",
    "ResourceClient",
    "Stats",
    "System",
]

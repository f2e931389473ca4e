"""
Fetcher interfaces.

Link resolution is the only place this package touches the outside world,
and it does so through one of these interfaces. Mock and real HTTP fetchers
both implement them; records never call a fetcher on their own.
"""

from abc import ABC, abstractmethod
from typing import Any


class ResourceFetcher(ABC):
    """Synchronous lookup of a resource by type and identity."""

    @abstractmethod
    def fetch(self, resource_type: str, identity: str) -> Any:
        """Return the resource, or raise ResourceNotFound."""


class AsyncResourceFetcher(ABC):
    """Asynchronous lookup of a resource by type and identity."""

    @abstractmethod
    async def fetch(self, resource_type: str, identity: str) -> Any:
        """Return the resource, or raise ResourceNotFound."""

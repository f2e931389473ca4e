"""
In-memory resource fetcher — MOCK client.

Serves link resolution from payloads registered up front. Makes no network
calls. Known resource families are decoded on every fetch so callers get a
fresh record, other families come back as the registered dict.
"""

import copy
import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from gocardless_resources.contracts.interfaces import AsyncResourceFetcher, ResourceFetcher
from gocardless_resources.errors import ResourceNotFound
from gocardless_resources.resources.collections import record_type_for

logger = logging.getLogger(__name__)


class InMemoryResourceFetcher(ResourceFetcher):
    """
    Mock fetcher.

    Parameters
    ----------
    payloads : iterable of (resource_type, payload) pairs, optional
        Initial resources. Each payload must carry an "id".
    """

    def __init__(self, payloads: Optional[Iterable[Tuple[str, Dict[str, Any]]]] = None):
        self._store: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self.calls: list = []
        for resource_type, payload in payloads or ():
            self.add(resource_type, payload)

    def add(self, resource_type: str, payload: Dict[str, Any]) -> None:
        self._store[(resource_type, payload["id"])] = copy.deepcopy(payload)

    def fetch(self, resource_type: str, identity: str) -> Any:
        self.calls.append((resource_type, identity))
        payload = self._store.get((resource_type, identity))
        if payload is None:
            logger.info("[MOCK] %s/%s not found", resource_type, identity)
            raise ResourceNotFound(resource_type, identity)

        record_type = record_type_for(resource_type)
        if record_type is None:
            return copy.deepcopy(payload)
        return record_type.decode(payload)


class InMemoryAsyncResourceFetcher(AsyncResourceFetcher):
    """Async facade over InMemoryResourceFetcher."""

    def __init__(self, fetcher: InMemoryResourceFetcher):
        self._fetcher = fetcher

    async def fetch(self, resource_type: str, identity: str) -> Any:
        return self._fetcher.fetch(resource_type, identity)

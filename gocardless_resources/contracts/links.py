"""
Weak references between resources.

A Link names another resource by identity and type. It never embeds the
target, never checks the target exists and never owns its lifecycle.
Resolving a link is an explicit call against a fetcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from gocardless_resources.contracts.interfaces import AsyncResourceFetcher, ResourceFetcher
from gocardless_resources.contracts.optional import NULL, UNSET, Present
from gocardless_resources.errors import LinkNotSet


@dataclass(frozen=True)
class Link:
    id: str
    resource_type: str

    def __str__(self) -> str:
        return self.id


def _target(link: Union[Link, Any]) -> Link:
    if isinstance(link, Present):
        link = link.value
    if isinstance(link, Link):
        return link
    if link is UNSET:
        raise LinkNotSet("link is not set")
    if link is NULL:
        raise LinkNotSet("link is null")
    raise TypeError(f"expected a Link or a link field, got {type(link).__name__}")


def resolve(link: Union[Link, Any], fetcher: ResourceFetcher) -> Any:
    """Fetch the resource a link points at."""
    target = _target(link)
    return fetcher.fetch(target.resource_type, target.id)


async def resolve_async(link: Union[Link, Any], fetcher: AsyncResourceFetcher) -> Any:
    target = _target(link)
    return await fetcher.fetch(target.resource_type, target.id)

"""
Envelope and collection decoding.

Single resources arrive wrapped as {"redirect_flows": {...}}; lists arrive as
{"events": [...], "meta": {...}}. A malformed item in a list must not stop the
caller from reading the rest, so collection decoding returns one outcome per
item instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterator, List, Optional, Type, TypeVar

from gocardless_resources.contracts.fields import json_type_name
from gocardless_resources.contracts.records import Resource
from gocardless_resources.errors import DecodeError, SchemaViolation
from gocardless_resources.resources.events import Event
from gocardless_resources.resources.redirect_flows import RedirectFlow

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Resource)

RESOURCE_TYPES: Dict[str, Type[Resource]] = {
    RedirectFlow.envelope_key: RedirectFlow,
    Event.envelope_key: Event,
}


@dataclass(frozen=True)
class DecodeOutcome(Generic[T]):
    index: int
    record: Optional[T] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DecodeBatch(Generic[T]):
    outcomes: tuple

    def __iter__(self) -> Iterator[DecodeOutcome[T]]:
        return iter(self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)

    def records(self) -> List[T]:
        """Successfully decoded records, skipping failures."""
        return [o.record for o in self.outcomes if o.ok]

    def failures(self) -> List[DecodeOutcome[T]]:
        return [o for o in self.outcomes if not o.ok]

    def raise_first(self) -> "DecodeBatch[T]":
        """Abort on the first failed item, if any."""
        for outcome in self.outcomes:
            if outcome.error is not None:
                raise outcome.error
        return self


def decode_envelope(body: Any, record_type: Type[T]) -> T:
    """Unwrap and decode a single-resource response body."""
    key = record_type.envelope_key
    if not isinstance(body, dict):
        raise SchemaViolation(f"expected an object, got {json_type_name(body)}", payload=body)
    if key in body:
        return record_type.decode(body[key], key)
    return record_type.decode(body)


def decode_collection(body: Any, record_type: Type[T]) -> DecodeBatch[T]:
    """
    Decode a list response, either a bare array or an envelope.

    Raises SchemaViolation only when the body itself has the wrong shape;
    per-item failures are reported in the returned batch.
    """
    key = record_type.envelope_key
    items = body
    path = ""
    if isinstance(body, dict):
        items = body.get(key)
        path = key
    if not isinstance(items, list):
        raise SchemaViolation(
            f"expected an array of {key}, got {json_type_name(items)}",
            path=path,
            payload=body,
        )

    outcomes = []
    for index, item in enumerate(items):
        item_path = f"{path}[{index}]" if path else f"[{index}]"
        try:
            outcomes.append(DecodeOutcome(index=index, record=record_type.decode(item, item_path)))
        except DecodeError as exc:
            logger.warning("Skipping undecodable %s item %d at %s: %s", key, index, exc.path, exc)
            outcomes.append(DecodeOutcome(index=index, error=exc))
    return DecodeBatch(outcomes=tuple(outcomes))


def record_type_for(envelope_key: str) -> Optional[Type[Resource]]:
    return RESOURCE_TYPES.get(envelope_key)

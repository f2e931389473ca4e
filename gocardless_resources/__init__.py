"""
Resource modeling layer for the GoCardless payments API.

This package turns parsed JSON response bodies into immutable, typed records
and back again. It contains:
- contracts/  the shared machinery: three-state optional values, extensible
  enumerations, links, metadata and the field-to-wire tables
- resources/  the concrete resource families (redirect flows, events) and
  envelope/collection decoding
- clients/    fetchers used to resolve links (in-memory mock and real HTTP)

Key rule:
- Records never perform I/O. Following a link is always an explicit
  resolve(...) call against a fetcher.
"""

from .contracts.enumeration import EnumValue, Unknown, WireEnum, is_known, wire_value
from .contracts.interfaces import AsyncResourceFetcher, ResourceFetcher
from .contracts.links import Link, resolve, resolve_async
from .contracts.metadata import Metadata
from .contracts.optional import (
    NULL,
    UNSET,
    OptionalField,
    Present,
    is_null,
    is_present,
    is_unset,
    value_or,
    wrap,
)
from .contracts.records import Record, Resource
from .errors import (
    DecodeError,
    LinkNotSet,
    MissingIdentity,
    ResourceNotFound,
    SchemaViolation,
)
from .resources.collections import (
    DecodeBatch,
    DecodeOutcome,
    decode_collection,
    decode_envelope,
)
from .resources.events import (
    Event,
    EventCustomerNotification,
    EventCustomerNotificationType,
    EventDetails,
    EventDetailsOrigin,
    EventDetailsScheme,
    EventLinks,
    EventResourceType,
)
from .resources.redirect_flows import (
    RedirectFlow,
    RedirectFlowCompleteRequest,
    RedirectFlowCreateLinks,
    RedirectFlowCreateRequest,
    RedirectFlowLinks,
    RedirectFlowScheme,
)

__all__ = [
    # contracts
    "EnumValue", "Unknown", "WireEnum", "is_known", "wire_value",
    "AsyncResourceFetcher", "ResourceFetcher",
    "Link", "resolve", "resolve_async",
    "Metadata",
    "NULL", "UNSET", "OptionalField", "Present",
    "is_null", "is_present", "is_unset", "value_or", "wrap",
    "Record", "Resource",
    # errors
    "DecodeError", "LinkNotSet", "MissingIdentity", "ResourceNotFound", "SchemaViolation",
    # collections
    "DecodeBatch", "DecodeOutcome", "decode_collection", "decode_envelope",
    # events
    "Event", "EventCustomerNotification", "EventCustomerNotificationType",
    "EventDetails", "EventDetailsOrigin", "EventDetailsScheme", "EventLinks",
    "EventResourceType",
    # redirect flows
    "RedirectFlow", "RedirectFlowCompleteRequest", "RedirectFlowCreateLinks",
    "RedirectFlowCreateRequest", "RedirectFlowLinks", "RedirectFlowScheme",
]

"""
Field-to-wire tables.

Each record type declares a static tuple of WireField objects naming the
attribute, its wire key and how the value is decoded and encoded. The record
base class walks that tuple; there is no reflection over attribute names.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Dict, Optional, Type

from pydantic import AwareDatetime, TypeAdapter, ValidationError

from gocardless_resources.contracts.enumeration import WireEnum, wire_value
from gocardless_resources.contracts.links import Link
from gocardless_resources.contracts.metadata import Metadata
from gocardless_resources.contracts.optional import NULL, UNSET, Present, wrap
from gocardless_resources.errors import MissingIdentity, SchemaViolation

_TIMESTAMP = TypeAdapter(AwareDatetime)

# Date part of an ISO-8601 timestamp. Pydantic alone would also take "1700000000" as Unix time.
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}[Tt ]")

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


def json_type_name(value: Any) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def join_path(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


class WireField:
    """One attribute of a record and its wire key."""

    def __init__(self, attr: str, wire_name: Optional[str] = None) -> None:
        self.attr = attr
        self.wire_name = wire_name or attr

    # -- decode --

    def read(self, payload: Dict[str, Any], path: str) -> Any:
        if self.wire_name not in payload:
            return UNSET
        raw = payload[self.wire_name]
        if raw is None:
            return NULL
        return Present(self.decode(raw, path))

    def decode(self, raw: Any, path: str) -> Any:
        return raw

    # -- encode --

    def write(self, value: Any, out: Dict[str, Any]) -> None:
        if value is UNSET:
            return
        if value is NULL:
            out[self.wire_name] = None
            return
        out[self.wire_name] = self.encode(value.value)

    def encode(self, value: Any) -> Any:
        return value

    def lift(self, value: Any) -> Any:
        return wrap(value)

    def _mismatch(self, expected: str, raw: Any, path: str) -> SchemaViolation:
        return SchemaViolation(
            f"expected {expected}, got {json_type_name(raw)}",
            path=path,
            payload=raw,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attr!r} <-> {self.wire_name!r})"


class StringField(WireField):
    def decode(self, raw: Any, path: str) -> str:
        if not isinstance(raw, str):
            raise self._mismatch("a string", raw, path)
        return raw


class BooleanField(WireField):
    def decode(self, raw: Any, path: str) -> bool:
        if not isinstance(raw, bool):
            raise self._mismatch("a boolean", raw, path)
        return raw


class TimestampField(WireField):
    """ISO-8601 timestamp with an offset, decoded to an aware datetime."""

    def decode(self, raw: Any, path: str) -> datetime:
        if not isinstance(raw, str):
            raise self._mismatch("an ISO-8601 timestamp string", raw, path)
        if not _ISO_DATE.match(raw):
            raise SchemaViolation(f"invalid timestamp {raw!r}", path=path, payload=raw)
        try:
            return _TIMESTAMP.validate_python(raw)
        except ValidationError as exc:
            raise SchemaViolation(f"invalid timestamp {raw!r}", path=path, payload=raw) from exc

    def encode(self, value: datetime) -> str:
        return value.isoformat()


class EnumField(WireField):
    def __init__(self, attr: str, enum_type: Type[WireEnum], wire_name: Optional[str] = None) -> None:
        super().__init__(attr, wire_name)
        self.enum_type = enum_type

    def decode(self, raw: Any, path: str) -> Any:
        if not isinstance(raw, str):
            raise self._mismatch(f"a {self.enum_type.__name__} string", raw, path)
        return self.enum_type.from_wire(raw)

    def encode(self, value: Any) -> str:
        return wire_value(value)

    def lift(self, value: Any) -> Any:
        # Members of another WireEnum compare equal as strings; re-read them in this family.
        if isinstance(value, str) and not isinstance(value, self.enum_type):
            value = self.enum_type.from_wire(wire_value(value) if isinstance(value, WireEnum) else value)
        return wrap(value)


class LinkField(WireField):
    """
    Identifier of a resource of `resource_type`.

    An empty string carries no identity and is read as NULL.
    """

    def __init__(self, attr: str, resource_type: str, wire_name: Optional[str] = None) -> None:
        super().__init__(attr, wire_name)
        self.resource_type = resource_type

    def read(self, payload: Dict[str, Any], path: str) -> Any:
        if payload.get(self.wire_name) == "":
            return NULL
        return super().read(payload, path)

    def decode(self, raw: Any, path: str) -> Link:
        if not isinstance(raw, str):
            raise self._mismatch("a resource identifier string", raw, path)
        return Link(raw, self.resource_type)

    def encode(self, value: Link) -> str:
        return value.id

    def lift(self, value: Any) -> Any:
        if isinstance(value, str):
            value = Link(value, self.resource_type) if value else None
        return wrap(value)


class MetadataField(WireField):
    def decode(self, raw: Any, path: str) -> Metadata:
        return Metadata.from_wire(raw, path)

    def encode(self, value: Metadata) -> Dict[str, str]:
        return value.to_wire()

    def lift(self, value: Any) -> Any:
        if isinstance(value, dict):
            value = Metadata(value)
        return wrap(value)


class NestedField(WireField):
    """A nested object decoded as another record type."""

    def __init__(self, attr: str, record_type: type, wire_name: Optional[str] = None) -> None:
        super().__init__(attr, wire_name)
        self.record_type = record_type

    def decode(self, raw: Any, path: str) -> Any:
        if not isinstance(raw, dict):
            raise self._mismatch("an object", raw, path)
        return self.record_type.decode(raw, path)

    def encode(self, value: Any) -> Dict[str, Any]:
        return value.to_wire()


class LinksField(NestedField):
    """
    The `links` sub-record.

    Always materialised: an absent or null `links` object reads as an empty
    links record, so `record.links.<name>` is always safe to inspect. It is
    only written when at least one link is set.
    """

    def __init__(self, record_type: type, attr: str = "links") -> None:
        super().__init__(attr, record_type)

    def read(self, payload: Dict[str, Any], path: str) -> Any:
        raw = payload.get(self.wire_name)
        if raw is None:
            return self.record_type()
        return self.decode(raw, path)

    def write(self, value: Any, out: Dict[str, Any]) -> None:
        encoded = value.to_wire()
        if encoded:
            out[self.wire_name] = encoded

    def lift(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.record_type.build(**value)
        return value


class NestedListField(NestedField):
    """An array of nested objects, decoded to a tuple of records."""

    def decode(self, raw: Any, path: str) -> tuple:
        if not isinstance(raw, list):
            raise self._mismatch("an array", raw, path)
        items = []
        for index, item in enumerate(raw):
            items.append(super().decode(item, f"{path}[{index}]"))
        return tuple(items)

    def encode(self, value: tuple) -> list:
        return [item.to_wire() for item in value]

    def lift(self, value: Any) -> Any:
        if isinstance(value, list):
            value = tuple(value)
        return wrap(value)


class IdentityField(WireField):
    """The required `id` of a read-context resource. Stored as a plain string."""

    def __init__(self) -> None:
        super().__init__("id")

    def read(self, payload: Dict[str, Any], path: str) -> str:
        raw = payload.get(self.wire_name)
        if raw is None or raw == "":
            raise MissingIdentity(
                "resource has no identity",
                path=path,
                payload=payload,
            )
        if not isinstance(raw, str):
            raise self._mismatch("an identifier string", raw, path)
        return raw

    def write(self, value: Any, out: Dict[str, Any]) -> None:
        out[self.wire_name] = value

    def lift(self, value: Any) -> Any:
        if value is None or value == "":
            raise MissingIdentity("resource has no identity", path=self.wire_name, payload=value)
        if not isinstance(value, str):
            raise TypeError(f"id must be a string, got {type(value).__name__}")
        return value

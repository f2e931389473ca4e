"""
Record base classes.

Record      a decodable/encodable object driven by its `wire_fields` table
Resource    a Record with a required identity, used for read responses

Records are frozen dataclasses. `evolve` returns a new record and leaves the
original untouched.
"""

from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Dict, Tuple, TypeVar

from gocardless_resources.contracts.fields import WireField, join_path, json_type_name
from gocardless_resources.errors import SchemaViolation

R = TypeVar("R", bound="Record")


@dataclasses.dataclass(frozen=True)
class Record:
    wire_fields: ClassVar[Tuple[WireField, ...]] = ()

    @classmethod
    def decode(cls: type[R], payload: Any, path: str = "") -> R:
        """
        Decode a parsed JSON object into a record.

        Keys missing from `wire_fields` are ignored. Raises SchemaViolation or
        MissingIdentity with the dotted path of the offending field.
        """
        if not isinstance(payload, dict):
            raise SchemaViolation(
                f"expected an object for {cls.__name__}, got {json_type_name(payload)}",
                path=path,
                payload=payload,
            )
        values = {f.attr: f.read(payload, join_path(path, f.wire_name)) for f in cls.wire_fields}
        return cls(**values)

    @classmethod
    def build(cls: type[R], **values: Any) -> R:
        """
        Construct a record from plain values.

        Plain values become Present, None becomes NULL and attributes not
        passed stay UNSET.
        """
        by_attr = cls._fields_by_attr()
        unknown = set(values) - set(by_attr)
        if unknown:
            raise TypeError(f"{cls.__name__} has no fields {sorted(unknown)}")
        return cls(**{name: by_attr[name].lift(value) for name, value in values.items()})

    def evolve(self: R, **changes: Any) -> R:
        by_attr = self._fields_by_attr()
        unknown = set(changes) - set(by_attr)
        if unknown:
            raise TypeError(f"{type(self).__name__} has no fields {sorted(unknown)}")
        return dataclasses.replace(self, **{name: by_attr[name].lift(value) for name, value in changes.items()})

    def to_wire(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in self.wire_fields:
            f.write(getattr(self, f.attr), out)
        return out

    @classmethod
    def _fields_by_attr(cls) -> Dict[str, WireField]:
        return {f.attr: f for f in cls.wire_fields}


@dataclasses.dataclass(frozen=True)
class Resource(Record):
    """
    A server-side entity snapshot with a required `id`.

    The id prefix (RE, EV, ...) is informational and never parsed.
    """

    # Key of the JSON envelope and path segment of the endpoint.
    envelope_key: ClassVar[str] = ""

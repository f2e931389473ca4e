"""
Free-form metadata.

Caller-supplied string-to-string annotations. The server bounds them
(up to 3 keys, keys up to 50 characters, values up to 500 characters); this
client does not enforce those limits.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from gocardless_resources.contracts.optional import Present
from gocardless_resources.errors import SchemaViolation


class Metadata(Mapping):
    """Immutable mapping of string keys to string values."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping] = None) -> None:
        data: Dict[str, str] = dict(entries or {})
        for key, value in data.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(f"metadata entries must be str -> str; got {key!r}: {value!r}")
        object.__setattr__(self, "_entries", data)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Metadata is immutable")

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self._entries) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"Metadata({self._entries!r})"

    def __reduce__(self):
        return (Metadata, (dict(self._entries),))

    def with_entry(self, key: str, value: str) -> "Metadata":
        return Metadata({**self._entries, key: value})

    def without(self, key: str) -> "Metadata":
        return Metadata({k: v for k, v in self._entries.items() if k != key})

    def to_wire(self) -> Dict[str, str]:
        return dict(self._entries)

    @classmethod
    def from_wire(cls, raw: Any, path: str = "metadata") -> "Metadata":
        if not isinstance(raw, dict):
            raise SchemaViolation(
                f"expected an object of string values, got {type(raw).__name__}",
                path=path,
                payload=raw,
            )
        for key, value in raw.items():
            if not isinstance(value, str):
                raise SchemaViolation(
                    f"metadata values must be strings, got {type(value).__name__}",
                    path=f"{path}.{key}",
                    payload=raw,
                )
        return cls(raw)

    @staticmethod
    def equivalent(a: Any, b: Any) -> bool:
        """
        Compare two metadata field states.

        UNSET, NULL and an empty map all mean "no metadata" and compare equal.
        """
        return _entries_of(a) == _entries_of(b)


def _entries_of(field: Any) -> Dict[str, str]:
    if isinstance(field, Present):
        field = field.value
    if isinstance(field, Mapping):
        return dict(field)
    return {}

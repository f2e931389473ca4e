"""
Three-state optional values.

A field that is not always present on the wire is one of:

- UNSET          the key was absent from the payload (or never set by the caller)
- NULL           the key was present with an explicit null
- Present(value) the key was present with a value

Encoding omits UNSET, emits NULL as JSON null and Present as its value, so
"the client didn't touch this" and "the client cleared this" stay distinct
requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class _Unset:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Unset, ())


class _Null:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Null, ())


UNSET = _Unset()
NULL = _Null()


@dataclass(frozen=True)
class Present(Generic[T]):
    value: T


OptionalField = Union[_Unset, _Null, Present[T]]


def is_present(field: Any) -> bool:
    return isinstance(field, Present)


def is_unset(field: Any) -> bool:
    return field is UNSET


def is_null(field: Any) -> bool:
    return field is NULL


def value_or(field: Any, default: Any = None) -> Any:
    """Return the carried value, or `default` for UNSET and NULL."""
    if isinstance(field, Present):
        return field.value
    return default


def wrap(value: Any) -> Any:
    """
    Lift a plain caller value into the three-state model.

    Already-wrapped states pass through, None becomes NULL and anything else
    becomes Present(value).
    """
    if value is UNSET or value is NULL or isinstance(value, Present):
        return value
    if value is None:
        return NULL
    return Present(value)

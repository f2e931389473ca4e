"""
Decode and lookup errors.

Every decode failure is a DecodeError carrying the dotted path of the
offending field and the payload fragment that was being decoded, so a caller
walking a large collection response can decide to skip the item or abort.

Unrecognised enumeration members are deliberately absent from this module:
they decode to an Unknown value and are never an error.
"""

from __future__ import annotations

from typing import Any, Optional


class DecodeError(ValueError):
    def __init__(self, message: str, *, path: str = "", payload: Optional[Any] = None) -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path
        self.payload = payload


class SchemaViolation(DecodeError):
    """A structural shape was violated (wrong JSON type, non-string metadata, ...)."""


class MissingIdentity(DecodeError):
    """A read-context resource arrived without a usable `id`."""


class ResourceNotFound(LookupError):
    def __init__(self, resource_type: str, identity: str) -> None:
        super().__init__(f"{resource_type}/{identity} not found")
        self.resource_type = resource_type
        self.identity = identity


class LinkNotSet(LookupError):
    """Raised when resolving a link that is unset or explicitly null."""

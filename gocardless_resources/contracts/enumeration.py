"""
Extensible enumerations.

The API adds enumeration members over time (new schemes, new notification
types). Each enumeration is a `str` Enum of the members this client knows
about; anything else decodes to `Unknown(raw)` which carries the wire string
unchanged and encodes back to it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unknown:
    """An enumeration value this client does not recognise."""

    raw: str

    @property
    def value(self) -> str:
        return self.raw

    def __str__(self) -> str:
        return self.raw


class WireEnum(str, Enum):
    """Base for enumerations decoded from the wire."""

    @classmethod
    def from_wire(cls, raw: str) -> Union["WireEnum", Unknown]:
        try:
            return cls(raw)
        except ValueError:
            logger.debug("Unrecognised %s value %r, keeping as Unknown", cls.__name__, raw)
            return Unknown(raw)

    def __str__(self) -> str:
        return self.value


EnumValue = Union[WireEnum, Unknown]


def wire_value(member: EnumValue) -> str:
    """Wire string for a known member or an Unknown."""
    if isinstance(member, Unknown):
        return member.raw
    return member.value


def is_known(member: EnumValue) -> bool:
    return isinstance(member, WireEnum)

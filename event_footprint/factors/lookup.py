from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, TypeVar

from event_footprint.models.errors import InvalidConfiguration

V = TypeVar("V")
E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value: Any, field: str) -> E:
    """Return ``value`` as a member of ``enum_cls`` or raise InvalidConfiguration."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidConfiguration(
            f"Unrecognized {field} '{value}'. Expected one of: {allowed}",
            field=field,
        ) from None


def lookup(table: Mapping[E, V], enum_cls: type[E], key: Any, field: str) -> V:
    """Read a factor table; unknown keys are a configuration error, never zero."""
    member = coerce_enum(enum_cls, key, field)
    try:
        return table[member]
    except KeyError:
        raise InvalidConfiguration(
            f"No factor defined for {field} '{member.value}'", field=field
        ) from None

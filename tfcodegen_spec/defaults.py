"""Default value definitions for the attribute kinds of a provider spec."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class CustomDefault:
    """A default given by its schema definition and optional imports."""

    schema_definition: str = ""
    imports: tuple[str, ...] = ()


@dataclass(frozen=True)
class _Default:
    custom: Optional[CustomDefault] = None


@dataclass(frozen=True)
class Int32Default(_Default):
    """A static value, or a custom definition, for a 32-bit integer default."""

    static: Optional[int] = None


@dataclass(frozen=True)
class Int64Default(_Default):
    """A static value, or a custom definition, for a 64-bit integer default."""

    static: Optional[int] = None


@dataclass(frozen=True)
class StringDefault(_Default):
    """A static value, or a custom definition, for a string default."""

    static: Optional[str] = None


@dataclass(frozen=True)
class ListDefault(_Default):
    """A custom definition for a list default."""


@dataclass(frozen=True)
class MapDefault(_Default):
    """A custom definition for a map default."""


@dataclass(frozen=True)
class NumberDefault(_Default):
    """A custom definition for a generic number default."""


@dataclass(frozen=True)
class ObjectDefault(_Default):
    """A custom definition for an object default."""


@dataclass(frozen=True)
class SetDefault(_Default):
    """A custom definition for a set default."""


AnyDefault = Union[
    Int32Default,
    Int64Default,
    StringDefault,
    ListDefault,
    MapDefault,
    NumberDefault,
    ObjectDefault,
    SetDefault,
]


def custom_default(default: Optional[AnyDefault]) -> Optional[CustomDefault]:
    """Return the custom definition of a default, or None if there is none."""
    if default is None:
        return None
    return default.custom


def defaults_equal(
    default: Optional[AnyDefault], other: Optional[AnyDefault]
) -> bool:
    """Return True if both defaults are absent, or have equal fields.

    Defaults of different kinds are never equal.
    """
    if default is None and other is None:
        return True
    if default is None or other is None:
        return False
    if type(default) is not type(other):
        return False
    if default.custom != other.custom:
        return False
    return getattr(default, "static", None) == getattr(other, "static", None)
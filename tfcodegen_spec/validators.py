"""Validator definitions for the attribute kinds of a provider spec."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CustomValidator:
    """A validator given by its schema definition."""

    schema_definition: str = ""


def _sort_key(custom: CustomValidator) -> str:
    return custom.schema_definition


@dataclass(frozen=True)
class Validator:
    """A validator entry, optionally holding a custom definition."""

    custom: Optional[CustomValidator] = None

    def equal(self, other: Validator) -> bool:
        """Return True if both entries hold equal custom definitions."""
        return self.custom == other.custom


@dataclass(frozen=True)
class Float64Validator(Validator):
    """Validator for a 64-bit floating point attribute."""


@dataclass(frozen=True)
class Int32Validator(Validator):
    """Validator for a 32-bit integer attribute."""


@dataclass(frozen=True)
class Int64Validator(Validator):
    """Validator for a 64-bit integer attribute."""


@dataclass(frozen=True)
class ListValidator(Validator):
    """Validator for a list attribute."""


@dataclass(frozen=True)
class MapValidator(Validator):
    """Validator for a map attribute."""


@dataclass(frozen=True)
class NumberValidator(Validator):
    """Validator for a generic number attribute."""


@dataclass(frozen=True)
class ObjectValidator(Validator):
    """Validator for an object attribute."""


@dataclass(frozen=True)
class SetValidator(Validator):
    """Validator for a set attribute."""


@dataclass(frozen=True)
class StringValidator(Validator):
    """Validator for a string attribute."""


def custom_validators(
    validators: Optional[Iterable[Validator]],
) -> list[CustomValidator]:
    """Return the custom definitions of the entries that have one, in order."""
    if validators is None:
        return []
    return [v.custom for v in validators if v.custom is not None]


def validators_equal(
    validators: Optional[Sequence[Validator]],
    other: Optional[Sequence[Validator]],
) -> bool:
    """Compare two validator sequences regardless of order.

    ``None`` stands for an absent sequence and differs from an empty one.
    """
    if validators is None and other is None:
        return True
    if validators is None or other is None:
        return False
    if len(validators) != len(other):
        return False

    ours = sorted(custom_validators(validators), key=_sort_key)
    theirs = sorted(custom_validators(other), key=_sort_key)
    if len(ours) != len(theirs):
        return False

    return all(a == b for a, b in zip(ours, theirs))
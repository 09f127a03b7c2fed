"""Plan modifier definitions for the attribute kinds of a provider spec."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CustomPlanModifier:
    """A plan modifier given by its schema definition."""

    schema_definition: str = ""


def _sort_key(custom: CustomPlanModifier) -> str:
    return custom.schema_definition


@dataclass(frozen=True)
class PlanModifier:
    """A plan modifier entry, optionally holding a custom definition."""

    custom: Optional[CustomPlanModifier] = None

    def equal(self, other: PlanModifier) -> bool:
        """Return True if both entries hold equal custom definitions."""
        return self.custom == other.custom


@dataclass(frozen=True)
class Float64PlanModifier(PlanModifier):
    """Plan modifier for a 64-bit floating point attribute."""


@dataclass(frozen=True)
class Int32PlanModifier(PlanModifier):
    """Plan modifier for a 32-bit integer attribute."""


@dataclass(frozen=True)
class Int64PlanModifier(PlanModifier):
    """Plan modifier for a 64-bit integer attribute."""


@dataclass(frozen=True)
class ListPlanModifier(PlanModifier):
    """Plan modifier for a list attribute."""


@dataclass(frozen=True)
class MapPlanModifier(PlanModifier):
    """Plan modifier for a map attribute."""


@dataclass(frozen=True)
class NumberPlanModifier(PlanModifier):
    """Plan modifier for a generic number attribute."""


@dataclass(frozen=True)
class ObjectPlanModifier(PlanModifier):
    """Plan modifier for an object attribute."""


@dataclass(frozen=True)
class SetPlanModifier(PlanModifier):
    """Plan modifier for a set attribute."""


@dataclass(frozen=True)
class StringPlanModifier(PlanModifier):
    """Plan modifier for a string attribute."""


def custom_plan_modifiers(
    plan_modifiers: Optional[Iterable[PlanModifier]],
) -> list[CustomPlanModifier]:
    """Return the custom definitions of the entries that have one, in order."""
    if plan_modifiers is None:
        return []
    return [pm.custom for pm in plan_modifiers if pm.custom is not None]


def plan_modifiers_equal(
    plan_modifiers: Optional[Sequence[PlanModifier]],
    other: Optional[Sequence[PlanModifier]],
) -> bool:
    """Compare two plan modifier sequences regardless of order.

    ``None`` stands for an absent sequence and differs from an empty one.
    """
    if plan_modifiers is None and other is None:
        return True
    if plan_modifiers is None or other is None:
        return False
    if len(plan_modifiers) != len(other):
        return False

    ours = sorted(custom_plan_modifiers(plan_modifiers), key=_sort_key)
    theirs = sorted(custom_plan_modifiers(other), key=_sort_key)
    if len(ours) != len(theirs):
        return False

    return all(a == b for a, b in zip(ours, theirs))
"""Type definitions for the attributes and elements of a provider spec."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class CustomType:
    """A customisation of a type: an optional import plus type names."""

    import_path: Optional[str] = None
    type: str = ""
    value_type: str = ""


@dataclass
class BoolType:
    """A boolean."""

    custom_type: Optional[CustomType] = None


@dataclass
class DynamicType:
    """A value whose type is decided at run time."""

    custom_type: Optional[CustomType] = None


@dataclass
class Float32Type:
    """A 32-bit floating point number."""

    custom_type: Optional[CustomType] = None


@dataclass
class Float64Type:
    """A 64-bit floating point number."""

    custom_type: Optional[CustomType] = None


@dataclass
class Int32Type:
    """A 32-bit integer."""

    custom_type: Optional[CustomType] = None


@dataclass
class Int64Type:
    """A 64-bit integer."""

    custom_type: Optional[CustomType] = None


@dataclass
class NumberType:
    """A generic number of up to 512 bits of float or integer precision."""

    custom_type: Optional[CustomType] = None


@dataclass
class StringType:
    """A string."""

    custom_type: Optional[CustomType] = None


_KINDS = (
    "bool",
    "dynamic",
    "float32",
    "float64",
    "int32",
    "int64",
    "list",
    "map",
    "number",
    "object",
    "set",
    "string",
)


def _type_equal(a: object, b: object) -> bool:
    if isinstance(a, ObjectType):
        return object_types_equal(a, b)  # type: ignore[arg-type]
    if isinstance(a, (ListType, MapType, SetType)):
        if a.custom_type != b.custom_type:  # type: ignore[attr-defined]
            return False
        return a.element_type.equal(b.element_type)  # type: ignore[attr-defined]
    return a.custom_type == b.custom_type  # type: ignore[attr-defined]


def _kinds_equal(ours: object, theirs: object) -> bool:
    # The first kind set on either side decides the outcome.
    for kind in _KINDS:
        a = getattr(ours, kind)
        b = getattr(theirs, kind)
        if a is None and b is None:
            continue
        if a is None or b is None:
            return False
        return _type_equal(a, b)
    return True


@dataclass
class ElementType:
    """The type of the elements of a list, map or set."""

    bool: Optional[BoolType] = None
    dynamic: Optional[DynamicType] = None
    float32: Optional[Float32Type] = None
    float64: Optional[Float64Type] = None
    int32: Optional[Int32Type] = None
    int64: Optional[Int64Type] = None
    list: Optional[ListType] = None
    map: Optional[MapType] = None
    number: Optional[NumberType] = None
    object: Optional[ObjectType] = None
    set: Optional[SetType] = None
    string: Optional[StringType] = None

    def equal(self, other: ElementType) -> bool:
        """Return True if both element types are of the same, equal kind."""
        return _kinds_equal(self, other)


@dataclass
class ListType:
    """A list."""

    element_type: ElementType = field(default_factory=ElementType)
    custom_type: Optional[CustomType] = None


@dataclass
class MapType:
    """A map."""

    element_type: ElementType = field(default_factory=ElementType)
    custom_type: Optional[CustomType] = None


@dataclass
class SetType:
    """A set."""

    element_type: ElementType = field(default_factory=ElementType)
    custom_type: Optional[CustomType] = None


@dataclass
class ObjectType:
    """An object; ``None`` attribute types differ from an empty sequence."""

    attribute_types: Optional[Sequence[ObjectAttributeType]] = None
    custom_type: Optional[CustomType] = None

    def equal(self, other: Optional[ObjectType]) -> bool:
        """Return True if the attribute types and custom type are equal."""
        return object_types_equal(self, other)


@dataclass
class ObjectAttributeType:
    """A named attribute within an object, holding one kind of type."""

    name: str = ""
    bool: Optional[BoolType] = None
    dynamic: Optional[DynamicType] = None
    float32: Optional[Float32Type] = None
    float64: Optional[Float64Type] = None
    int32: Optional[Int32Type] = None
    int64: Optional[Int64Type] = None
    list: Optional[ListType] = None
    map: Optional[MapType] = None
    number: Optional[NumberType] = None
    object: Optional[ObjectType] = None
    set: Optional[SetType] = None
    string: Optional[StringType] = None

    def equal(self, other: ObjectAttributeType) -> bool:
        """Return True if the names match and the types are equal."""
        if self.name != other.name:
            return False
        return _kinds_equal(self, other)


@dataclass(frozen=True)
class ObjectValidateRequest:
    """Context for validating object attribute types."""

    path: str = ""


class ObjectAttributeTypesError(ValueError):
    """Raised when object attribute types fail validation."""

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = list(errors)
        super().__init__("\n".join(self.errors))


AnyObjectTypes = Optional[Sequence[ObjectAttributeType]]
_MaybeObjectType = Union[ObjectType, None]


def object_types_equal(object_type: _MaybeObjectType, other: _MaybeObjectType) -> bool:
    """Return True if both are absent, or both have equal fields."""
    if object_type is None and other is None:
        return True
    if object_type is None or other is None:
        return False
    if not object_attribute_types_equal(object_type.attribute_types, other.attribute_types):
        return False
    return object_type.custom_type == other.custom_type


def object_attribute_types_equal(attribute_types: AnyObjectTypes, other: AnyObjectTypes) -> bool:
    """Compare attribute types by name order, regardless of given order."""
    if attribute_types is None and other is None:
        return True
    if attribute_types is None or other is None:
        return False
    if len(attribute_types) != len(other):
        return False
    ours = sorted(attribute_types, key=lambda a: a.name)
    theirs = sorted(other, key=lambda a: a.name)
    return all(a.equal(b) for a, b in zip(ours, theirs))


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _collect_errors(attribute_types: AnyObjectTypes, path: str) -> list[str]:
    seen: set[str] = set()
    errors: list[str] = []
    nested: list[str] = []
    for attribute_type in attribute_types or ():
        name = attribute_type.name
        if name in seen:
            errors.append(f"{path} object attribute type {_quote(name)} is duplicated")
        seen.add(name)
        if attribute_type.object is not None:
            nested_path = f"{path} object attribute type {_quote(name)}"
            nested.extend(_collect_errors(attribute_type.object.attribute_types, nested_path))
    return errors + nested


def validate_object_attribute_types(
    attribute_types: AnyObjectTypes, request: ObjectValidateRequest
) -> None:
    """Check that attribute names are unique within each object, recursively.

    Raises ObjectAttributeTypesError listing every duplicate found.
    """
    errors = _collect_errors(attribute_types, request.path)
    if errors:
        raise ObjectAttributeTypesError(errors)
# tfcodegen-spec

A small data model for a code-generation specification: attribute types,
default values, validators and plan modifiers, with the equality rules that
generators rely on to decide whether two specifications describe the same
thing.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What it contains

- `tfcodegen_spec.types`: `BoolType`, `DynamicType`, `Float32Type`,
  `Float64Type`, `Int32Type`, `Int64Type`, `NumberType`, `StringType`,
  `ListType`, `MapType`, `SetType`, `ObjectType`, `ObjectAttributeType` and
  `ElementType`, each optionally carrying a `CustomType` (`import_path`,
  `type`, `value_type`).
  - `ElementType.equal` and `ObjectAttributeType.equal` compare the first
    kind of type that is set on either side; attribute types also compare
    their `name`.
  - `object_types_equal` (also `ObjectType.equal`) compares attribute types
    and custom types; `None` attribute types differ from an empty sequence.
  - `object_attribute_types_equal` compares attribute types after sorting
    them by name, so their order does not matter.
  - `validate_object_attribute_types(attribute_types, ObjectValidateRequest(path=...))`
    checks that attribute names are unique at every level of nesting and
    raises `ObjectAttributeTypesError` (a `ValueError` whose `errors`
    attribute lists every message) when they are not.
- `tfcodegen_spec.defaults`: `Int32Default`, `Int64Default`, `StringDefault`
  (a `static` value and/or a `CustomDefault`) and `ListDefault`,
  `MapDefault`, `NumberDefault`, `ObjectDefault`, `SetDefault` (a
  `CustomDefault` only). `defaults_equal` and `custom_default` both accept
  `None`; defaults of different kinds are never equal.
- `tfcodegen_spec.validators`: per-type validators such as
  `StringValidator`, each wrapping an optional `CustomValidator`.
  `custom_validators` returns the custom definitions that are present, and
  `validators_equal` compares two sequences without regard to order.
- `tfcodegen_spec.plan_modifiers`: the same shape for plan modifiers, with
  `CustomPlanModifier`, `custom_plan_modifiers` and `plan_modifiers_equal`.

## Example

```python
from tfcodegen_spec.validators import (
    CustomValidator,
    StringValidator,
    validators_equal,
)

first = [
    StringValidator(custom=CustomValidator(schema_definition="two")),
    StringValidator(custom=CustomValidator(schema_definition="one")),
]
second = [
    StringValidator(custom=CustomValidator(schema_definition="one")),
    StringValidator(custom=CustomValidator(schema_definition="two")),
]

assert validators_equal(first, second)
assert validators_equal(None, None)
assert not validators_equal(None, [])
```

`None` stands for an absent list and is distinct from an empty one, so
`validators_equal(None, [])` is false while `validators_equal([], [])` is true.

## What it does not do

The package is an in-memory model only. It does not read or write
specification files (JSON or otherwise), does not check documents against a
schema, generates no code and provides no command-line tool. Callers build the
dataclasses themselves and use the comparison and validation functions above.
import pytest

from tfcodegen_spec.validators import (
    CustomValidator,
    Float64Validator,
    Int32Validator,
    Int64Validator,
    ListValidator,
    MapValidator,
    NumberValidator,
    ObjectValidator,
    SetValidator,
    StringValidator,
    Validator,
    custom_validators,
    validators_equal,
)

VALIDATOR_KINDS = [
    Float64Validator,
    Int32Validator,
    Int64Validator,
    ListValidator,
    MapValidator,
    NumberValidator,
    ObjectValidator,
    SetValidator,
    StringValidator,
]


def _cases(kind):
    return {
        "validators_both_nil": (None, None, True),
        "validators_nil_other_not_nil": (None, [kind()], False),
        "validators_not_nil_other_nil": ([kind()], None, False),
        "validators_len_diff": ([kind(custom=CustomValidator())], [], False),
        "validators_len_same": (
            [kind(custom=CustomValidator())],
            [kind(custom=CustomValidator())],
            True,
        ),
        "validators_len_same_with_custom_nils": (
            [kind()],
            [kind(custom=CustomValidator())],
            False,
        ),
        "validators_schema_definition_same_order": (
            [
                kind(custom=CustomValidator(schema_definition="one")),
                kind(custom=CustomValidator(schema_definition="two")),
            ],
            [
                kind(custom=CustomValidator(schema_definition="one")),
                kind(custom=CustomValidator(schema_definition="two")),
            ],
            True,
        ),
        "validators_schema_definition_different_order": (
            [
                kind(custom=CustomValidator(schema_definition="two")),
                kind(custom=CustomValidator(schema_definition="one")),
            ],
            [
                kind(custom=CustomValidator(schema_definition="one")),
                kind(custom=CustomValidator(schema_definition="two")),
            ],
            True,
        ),
    }


_PARAMS = [
    pytest.param(kind, name, id=f"{kind.__name__}-{name}")
    for kind in VALIDATOR_KINDS
    for name in _cases(kind)
]


@pytest.mark.parametrize("kind,name", _PARAMS)
def test_validators_equal(kind, name):
    validators, other, expected = _cases(kind)[name]
    assert validators_equal(validators, other) is expected


@pytest.mark.parametrize("kind", VALIDATOR_KINDS)
def test_validators_equal_different_definitions(kind):
    ours = [kind(custom=CustomValidator(schema_definition="one"))]
    theirs = [kind(custom=CustomValidator(schema_definition="two"))]
    assert validators_equal(ours, theirs) is False


def test_validators_equal_is_symmetric_for_order():
    a = [
        StringValidator(custom=CustomValidator(schema_definition="b")),
        StringValidator(custom=CustomValidator(schema_definition="a")),
    ]
    b = list(reversed(a))
    assert validators_equal(a, b) is True
    assert validators_equal(b, a) is True


def test_validators_equal_does_not_reorder_input():
    a = [
        StringValidator(custom=CustomValidator(schema_definition="two")),
        StringValidator(custom=CustomValidator(schema_definition="one")),
    ]
    validators_equal(a, list(a))
    assert [v.custom.schema_definition for v in a] == ["two", "one"]


def test_custom_validators_skips_missing():
    one = CustomValidator(schema_definition="one")
    two = CustomValidator(schema_definition="two")
    result = custom_validators(
        [ListValidator(custom=one), ListValidator(), ListValidator(custom=two)]
    )
    assert result == [one, two]


def test_custom_validators_none_is_empty():
    assert custom_validators(None) == []


def test_validator_equal():
    a = Validator(custom=CustomValidator(schema_definition="x"))
    b = Validator(custom=CustomValidator(schema_definition="x"))
    c = Validator(custom=CustomValidator(schema_definition="y"))
    assert a.equal(b) is True
    assert a.equal(c) is False
    assert Validator().equal(Validator()) is True
    assert Validator().equal(a) is False
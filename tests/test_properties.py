"""Algebraic properties checked over a fixed grid of schemas and instances."""

import pytest

from schematize import (
    ArraySchema,
    CollectionSchema,
    CustomSchema,
    EnumSchema,
    IntersectionSchema,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    StringSchema,
    TypeSchema,
    UnionSchema,
)


INSTANCES = [
    None,
    True,
    False,
    0,
    1,
    42,
    -3,
    2.5,
    42.0,
    "",
    "abc",
    "123",
    [],
    [1, 2],
    [1, 1],
    [1, True],
    [True, True],
    ["a"],
    (1, 2),
    {},
    {"a": 1},
    {"a": "x"},
    {"name": "John", "age": 30},
]

SCHEMAS = [
    TypeSchema(int),
    TypeSchema(str),
    StringSchema(min_length=2),
    StringSchema(pattern=r"\d"),
    NumberSchema(minimum=0),
    NumberSchema(multiple_of=2),
    EnumSchema([1, "abc", None]),
    OptionalSchema(TypeSchema(int)),
    CollectionSchema(NumberSchema()),
    ArraySchema(TypeSchema(int), max_items=1),
    ObjectSchema({"a": TypeSchema(int)}),
    CustomSchema(bool),
]


@pytest.mark.parametrize("schema", SCHEMAS, ids=str)
def test_validate_matches_trace(schema):
    for value in INSTANCES:
        assert schema.validate(value) == schema.trace(value).is_valid


@pytest.mark.parametrize("left", SCHEMAS, ids=str)
@pytest.mark.parametrize("right", SCHEMAS[::3], ids=str)
def test_union_is_logical_or(left, right):
    union = UnionSchema([left, right])
    for value in INSTANCES:
        assert union.validate(value) == (left.validate(value) or right.validate(value))


@pytest.mark.parametrize("left", SCHEMAS, ids=str)
@pytest.mark.parametrize("right", SCHEMAS[::3], ids=str)
def test_intersection_is_logical_and(left, right):
    intersection = IntersectionSchema([left, right])
    for value in INSTANCES:
        assert intersection.validate(value) == (left.validate(value) and right.validate(value))


@pytest.mark.parametrize("schema", SCHEMAS + [None], ids=str)
def test_optional_accepts_none(schema):
    assert OptionalSchema(schema).validate(None)


def test_type_schema_never_accepts_none_unless_asked():
    for schema_type in (int, float, str, bool, list, dict):
        assert not TypeSchema(schema_type).validate(None)


@pytest.mark.parametrize("extra_key", ["grades", "x", ""])
@pytest.mark.parametrize("extra_value", [None, 1, [8, 9, 10], {"nested": True}])
def test_extra_keys_only_matter_in_strict_mode(extra_key, extra_value):
    fields = {"name": TypeSchema(str), "age": TypeSchema(int)}
    valid = {"name": "John", "age": 30}
    invalid = {"name": "John", "age": "30"}

    lenient = ObjectSchema(fields)
    strict = ObjectSchema(fields, strict=True)

    assert lenient.validate({**valid, extra_key: extra_value})
    assert not lenient.validate({**invalid, extra_key: extra_value})
    assert strict.validate(valid)
    assert not strict.validate({**valid, extra_key: extra_value})


def test_empty_collections_accepted_without_minimum():
    for schema in (CollectionSchema(TypeSchema(int)), CollectionSchema(StringSchema())):
        assert schema.validate({})
        assert schema.validate([])
    assert ArraySchema(TypeSchema(int)).validate([])


@pytest.mark.parametrize("value", [{}, {"a": 1}, {"a": 1, "b": 2}])
def test_array_rejects_every_mapping(value):
    assert not ArraySchema(OptionalSchema()).validate(value)

import pytest

from schematize import (
    ROOT,
    IntersectionSchema,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    StringSchema,
    TypeSchema,
    UnionSchema,
    ValidationError,
)


# ─── OptionalSchema ────────────────────────────────────────────────────────

def test_optional_accepts_none():
    schema = OptionalSchema(TypeSchema(int))
    assert not TypeSchema(int).validate(None)
    node = schema.trace(None)
    assert node.is_valid
    assert node.reason == "value is null"
    assert node.path is None


def test_optional_delegates_below_marker_segment():
    schema = OptionalSchema(TypeSchema(int))
    assert schema.validate(1)
    node = schema.trace("a")
    assert not node.is_valid
    assert node.path == "?"
    assert node.reason == "expected int, found str"

    nested = schema.trace("a", parent=ROOT.child("age"))
    assert nested.path == "age.?"


@pytest.mark.parametrize("value", [None, 1, "az", [], {"a": 1}])
def test_optional_without_schema_accepts_anything(value):
    assert OptionalSchema().validate(value)


# ─── UnionSchema ───────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "value, expected",
    [
        (42.0, True),
        (42, True),
        (None, False),
        ("42.0", False),
        ([42.0], False),
        ({"number": 42.0}, False),
    ],
)
def test_union_of_int_and_float(value, expected):
    schema = UnionSchema([TypeSchema(int), TypeSchema(float)])
    assert schema.validate(value) is expected


def test_union_returns_first_accepting_node():
    schema = UnionSchema([StringSchema(min_length=1), TypeSchema(str)])
    assert schema.trace("x").reason == "'x'"
    assert schema.trace("").reason == "found str"


def test_union_failure_is_reported_at_union_path():
    schema = UnionSchema([TypeSchema(int), TypeSchema(float)])
    node = schema.trace("a", parent=ROOT.child("value"))
    assert not node.is_valid
    assert node.path == "value"
    assert node.reason == "no schema could be matched: of(int), of(float)"


def test_empty_union_rejects_everything():
    assert not UnionSchema([]).validate(None)


def test_union_members_are_stored_as_tuple():
    members = [TypeSchema(int)]
    schema = UnionSchema(members)
    members.append(TypeSchema(str))
    assert schema.schemas == (TypeSchema(int),)
    assert not schema.validate("a")


# ─── IntersectionSchema ────────────────────────────────────────────────────

def test_intersection_of_objects():
    schema = IntersectionSchema([
        ObjectSchema({"a": TypeSchema(int)}),
        ObjectSchema({"b": TypeSchema(float)}),
    ])
    assert not schema.validate({"a": 1})
    assert not schema.validate({"b": 3.14})
    assert schema.validate({"a": 1, "b": 3.14})


def test_intersection_returns_first_rejection():
    schema = IntersectionSchema([NumberSchema(minimum=0), NumberSchema(maximum=10)])
    assert schema.trace(-1).reason == "-1 is lesser than 0"
    assert schema.trace(11).reason == "11 is greater than 10"
    node = schema.trace(5, parent=ROOT.child("n"))
    assert node.is_valid
    assert node.path == "n"
    assert node.reason == "all schemas matched"


def test_intersection_rejection_keeps_member_path():
    schema = IntersectionSchema([
        ObjectSchema({"a": TypeSchema(int)}),
        ObjectSchema({"b": TypeSchema(float)}),
    ])
    node = schema.trace({"a": 1, "b": "x"})
    assert node.path == "b"
    assert node.reason == "expected float, found str"


def test_empty_intersection_accepts_everything():
    assert IntersectionSchema([]).validate(object())


# ─── Schema.check ──────────────────────────────────────────────────────────

def test_check_returns_node_or_raises():
    schema = UnionSchema([TypeSchema(int), TypeSchema(float)])
    assert schema.check(1).reason == "found int"
    with pytest.raises(ValidationError) as exc_info:
        schema.check("a")
    assert exc_info.value.node.is_valid is False
    assert "no schema could be matched" in str(exc_info.value)

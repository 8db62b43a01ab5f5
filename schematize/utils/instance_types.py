from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List


NULL_NAME = "null"

SEQUENCE_TYPES = (list, tuple)

SCALAR_TYPES = (bool, int, float, str)


def type_name(value: Any) -> str:
    """Name of the runtime type of ``value`` as used in diagnostics."""
    if value is None:
        return NULL_NAME
    return type(value).__name__


def describe_type(expected: type) -> str:
    if expected is type(None):
        return NULL_NAME
    return getattr(expected, "__name__", str(expected))


def is_number(value: Any) -> bool:
    # bool is an int subclass but a distinct instance shape.
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float))


def is_sequence(value: Any) -> bool:
    return isinstance(value, SEQUENCE_TYPES)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_string_keyed_mapping(value: Any) -> bool:
    return is_mapping(value) and all(isinstance(key, str) for key in value)


def values_equal(left: Any, right: Any) -> bool:
    """Structural equality that keeps booleans apart from numbers.

    Sequences compare element-wise and mappings key-by-key, so ``[1]`` and
    ``[True]`` are different values while ``[1]`` and ``(1,)`` are the same.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if is_sequence(left) and is_sequence(right):
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right)
        )
    if is_mapping(left) and is_mapping(right):
        if left.keys() != right.keys():
            return False
        return all(values_equal(left[key], right[key]) for key in left)
    return left == right


def count_distinct(values: Iterable[Any]) -> int:
    """Count values distinct under :func:`values_equal`.

    Scalars are collapsed through a set keyed on ``(is_bool, value)``; nested
    lists and maps are compared pairwise.
    """
    scalars: set = set()
    nested: List[Any] = []
    for value in values:
        if value is None or isinstance(value, SCALAR_TYPES):
            scalars.add((isinstance(value, bool), value))
            continue
        if not any(values_equal(value, seen) for seen in nested):
            nested.append(value)
    return len(scalars) + len(nested)

# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Leaf schema variants: exact type, string, number, enumeration, custom."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple, Union

from ..debug_node import ROOT, DiagnosticNode
from ..exceptions import SchemaDefinitionError
from ..utils.instance_types import (
    describe_type,
    is_number,
    type_name,
    values_equal,
)
from .base import Schema, describe_call


Number = Union[int, float]


@dataclass(frozen=True)
class TypeSchema(Schema):
    """Accepts values whose runtime type is *exactly* ``type``.

    Subclasses are not accepted: ``TypeSchema(int)`` rejects ``True`` and
    ``TypeSchema(object)`` rejects everything but bare ``object()`` instances.
    Combine several with :class:`UnionSchema` to accept a wider set::

        UnionSchema([TypeSchema(int), TypeSchema(float)])
    """

    type: type

    def trace(self, value: Any, parent: DiagnosticNode = ROOT) -> DiagnosticNode:
        expected = describe_type(self.type)
        if type(value) is self.type:
            return parent.validate(f"found {expected}")
        return parent.invalidate(f"expected {expected}, found {type_name(value)}")

    def __str__(self) -> str:
        return f"of({describe_type(self.type)})"


@dataclass(frozen=True)
class StringSchema(Schema):
    """Accepts strings within the length bounds that contain a match of ``pattern``.

    ``pattern`` is searched anywhere in the string; anchor it with ``^...$``
    to require a full match. It is compiled when the schema is built, so an
    invalid expression raises :class:`SchemaDefinitionError` immediately.
    """

    min_length: int = 0
    max_length: Optional[int] = None
    pattern: Optional[str] = None
    _regex: Optional[re.Pattern] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.pattern is None:
            return
        try:
            regex = re.compile(self.pattern)
        except re.error as exc:
            raise SchemaDefinitionError(f"Invalid string pattern '{self.pattern}': {exc}") from exc
        object.__setattr__(self, "_regex", regex)

    def trace(self, value: Any, parent: DiagnosticNode = ROOT) -> DiagnosticNode:
        if not isinstance(value, str):
            return parent.invalidate(f"not a string: {value!r}")

        length = len(value)
        if length < self.min_length:
            return parent.invalidate(
                f"value's length is too short (minimum: {self.min_length}, actual: {length})"
            )
        if self.max_length is not None and length > self.max_length:
            return parent.invalidate(
                f"value's length is too large (maximum: {self.max_length}, actual: {length})"
            )
        if self._regex is not None and self._regex.search(value) is None:
            return parent.invalidate(f"value did not match (pattern: '{self.pattern}', actual: {value!r})")
        return parent.validate(repr(value))

    def __str__(self) -> str:
        return describe_call(
            "string",
            min_length=self.min_length or None,
            max_length=self.max_length,
            pattern=self.pattern,
        )


@dataclass(frozen=True)
class NumberSchema(Schema):
    """Accepts ints and floats (never bools) inside the configured bounds.

    Checks run in a fixed order and stop at the first failure: ``multiple_of``,
    ``maximum``, ``exclusive_maximum``, ``minimum``, ``exclusive_minimum``.

    ``multiple_of`` uses the plain ``%`` remainder, so float divisors such as
    ``0.1`` can reject values that are mathematically exact multiples.
    """

    multiple_of: Optional[Number] = None
    maximum: Optional[Number] = None
    exclusive_maximum: Optional[Number] = None
    minimum: Optional[Number] = None
    exclusive_minimum: Optional[Number] = None

    def trace(self, value: Any, parent: DiagnosticNode = ROOT) -> DiagnosticNode:
        if not is_number(value):
            return parent.invalidate(f"not a number: {value!r}")

        if self.multiple_of is not None and value % self.multiple_of != 0:
            return parent.invalidate(f"{value} is not divisible by {self.multiple_of}")
        if self.maximum is not None and value > self.maximum:
            return parent.invalidate(f"{value} is greater than {self.maximum}")
        if self.exclusive_maximum is not None and value >= self.exclusive_maximum:
            return parent.invalidate(f"{value} is greater or equal to {self.exclusive_maximum}")
        if self.minimum is not None and value < self.minimum:
            return parent.invalidate(f"{value} is lesser than {self.minimum}")
        if self.exclusive_minimum is not None and value <= self.exclusive_minimum:
            return parent.invalidate(f"{value} is lesser or equal to {self.exclusive_minimum}")
        return parent.validate(f"{value} is valid")

    def __str__(self) -> str:
        return describe_call(
            "number",
            multiple_of=self.multiple_of,
            maximum=self.maximum,
            exclusive_maximum=self.exclusive_maximum,
            minimum=self.minimum,
            exclusive_minimum=self.exclusive_minimum,
        )


@dataclass(frozen=True)
class EnumSchema(Schema):
    """Accepts any value equal to one of ``values``.

    ``values`` may be any iterable; it is stored as a tuple in the given order
    with duplicates dropped. Booleans never match numbers: ``True`` is not in
    ``EnumSchema([1])``.
    """

    values: Tuple[Any, ...]

    def __post_init__(self) -> None:
        unique = []
        for candidate in self.values:
            if not any(values_equal(candidate, seen) for seen in unique):
                unique.append(candidate)
        object.__setattr__(self, "values", tuple(unique))

    def trace(self, value: Any, parent: DiagnosticNode = ROOT) -> DiagnosticNode:
        enum_repr = repr(list(self.values))
        if any(values_equal(value, allowed) for allowed in self.values):
            return parent.validate(f"{value!r} is in the enum {enum_repr}")
        return parent.invalidate(f"{value!r} is not in the enum {enum_repr}")

    def __str__(self) -> str:
        return f"enumeration({list(self.values)!r})"


@dataclass(frozen=True)
class CustomSchema(Schema):
    """Accepts any value for which ``predicate`` returns true.

    The predicate is called exactly once per trace. Exceptions it raises are
    not caught.
    """

    predicate: Callable[[Any], bool]

    @property
    def predicate_name(self) -> str:
        return getattr(self.predicate, "__qualname__", repr(self.predicate))

    def trace(self, value: Any, parent: DiagnosticNode = ROOT) -> DiagnosticNode:
        if self.predicate(value):
            return parent.validate(f"callback {self.predicate_name} accepted")
        return parent.invalidate(f"callback {self.predicate_name} rejected")

    def __str__(self) -> str:
        return f"custom({self.predicate_name})"

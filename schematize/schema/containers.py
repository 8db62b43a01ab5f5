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

"""Container schema variants: objects, collections and arrays."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

from ..debug_node import ROOT, DiagnosticNode
from ..utils.instance_types import count_distinct, is_mapping, is_sequence, is_string_keyed_mapping
from .base import Schema, describe_call


@dataclass(frozen=True)
class ObjectSchema(Schema):
    """Accepts string-keyed mappings whose values match the schema of their key.

    Fields are checked in configuration order and the first rejecting field
    stops the validation. A key missing from the instance is checked as
    ``None``, so only :class:`OptionalSchema` fields may be absent. Keys the
    schema does not mention are ignored unless ``strict`` is set, in which
    case they reject the whole instance.

    Example::

        person = ObjectSchema({
            "name": StringSchema(),
            "age": TypeSchema(int),
            "nickname": OptionalSchema(StringSchema()),
        })
        person.validate({"name": "John", "age": 30})    # True
    """

    fields: Mapping[str, Schema]
    strict: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def trace(self, value: Any, parent: DiagnosticNode = ROOT) -> DiagnosticNode:
        if not is_string_keyed_mapping(value):
            return parent.invalidate(f"not an object: {value!r}")

        if self.strict:
            extraneous_keys = [key for key in value if key not in self.fields]
            if extraneous_keys:
                return parent.invalidate(f"extraneous keys: {', '.join(extraneous_keys)}")

        for field_name, field_schema in self.fields.items():
            node = field_schema.trace(value.get(field_name), parent=parent.child(field_name))
            if not node.is_valid:
                return node
        return parent.validate("all matched")

    def __str__(self) -> str:
        return describe_call("object", "{" + ", ".join(self.fields) + "}", strict=self.strict or None)


@dataclass(frozen=True)
class CollectionSchema(Schema):
    """Accepts lists and mappings whose every element matches ``schema``.

    List elements are labelled by their index and mapping values by their
    stringified key; the labels become the path segments of nested nodes.
    Before the elements are traced the collection size is checked against
    ``min_items``/``max_items`` and, with ``unique_items``, no two elements
    may be equal.
    """

    schema: Schema
    min_items: int = 0
    max_items: Optional[int] = None
    unique_items: bool = True

    def trace(self, value: Any, parent: DiagnosticNode = ROOT) -> DiagnosticNode:
        if is_sequence(value):
            entries = [(str(index), element) for index, element in enumerate(value)]
        elif is_mapping(value):
            entries = [(str(key), element) for key, element in value.items()]
        else:
            return parent.invalidate(f"expected a Map or a List, found {value!r}")
        return self._trace_entries(entries, parent)

    def _trace_entries(self, entries: List[Tuple[str, Any]], parent: DiagnosticNode) -> DiagnosticNode:
        length = len(entries)
        if length < self.min_items:
            return parent.invalidate(f"value is too short (minimum: {self.min_items}, actual: {length})")
        if self.max_items is not None and length > self.max_items:
            return parent.invalidate(f"value is too long (maximum: {self.max_items}, actual: {length})")
        if self.unique_items:
            distinct = count_distinct(element for _, element in entries)
            if distinct != length:
                return parent.invalidate(f"value is not unique (expected: {distinct}, actual: {length})")

        for label, element in entries:
            node = self.schema.trace(element, parent=parent.child(label))
            if not node.is_valid:
                return node
        return parent.validate("value matched the wrapped schema")

    def _options(self) -> dict:
        return {
            "min_items": self.min_items or None,
            "max_items": self.max_items,
            "unique_items": None if self.unique_items else False,
        }

    def __str__(self) -> str:
        return describe_call("collection", self.schema, **self._options())


@dataclass(frozen=True)
class ArraySchema(CollectionSchema):
    """Like :class:`CollectionSchema`, but only lists (or tuples) are accepted."""

    def trace(self, value: Any, parent: DiagnosticNode = ROOT) -> DiagnosticNode:
        if not is_sequence(value):
            return parent.invalidate(f"not an array: {value!r}")
        return super().trace(value, parent=parent)

    def __str__(self) -> str:
        return describe_call("array", self.schema, **self._options())

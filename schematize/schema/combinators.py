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

"""Schema combinators: optional, union and intersection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..debug_node import ROOT, DiagnosticNode
from .base import Schema, describe_call


# Path segment marking that validation entered an optional wrapper.
OPTIONAL_SEGMENT = "?"


@dataclass(frozen=True)
class OptionalSchema(Schema):
    """Makes ``schema`` accept ``None``.

    Without a wrapped schema every value is accepted. Inside an
    :class:`ObjectSchema` this is how a field is made optional: a missing key
    is looked up as ``None``.
    """

    schema: Optional[Schema] = None

    def trace(self, value: Any, parent: DiagnosticNode = ROOT) -> DiagnosticNode:
        if value is None:
            return parent.validate("value is null")
        if self.schema is None:
            return parent.validate(f"no wrapped schema was provided, accepted {value!r}")
        return self.schema.trace(value, parent=parent.child(OPTIONAL_SEGMENT))

    def __str__(self) -> str:
        if self.schema is None:
            return "optional()"
        return describe_call("optional", self.schema)


@dataclass(frozen=True)
class UnionSchema(Schema):
    """Accepts any value accepted by at least one of ``schemas``.

    Members are tried in order and the first accepting node is returned as is.
    When none accepts, the individual member failures are dropped and a single
    rejection listing every member is reported at the union's own path.
    """

    schemas: Tuple[Schema, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "schemas", tuple(self.schemas))

    def trace(self, value: Any, parent: DiagnosticNode = ROOT) -> DiagnosticNode:
        for schema in self.schemas:
            node = schema.trace(value, parent=parent)
            if node.is_valid:
                return node
        return parent.invalidate(f"no schema could be matched: {', '.join(str(s) for s in self.schemas)}")

    def __str__(self) -> str:
        return describe_call("union", *self.schemas)


@dataclass(frozen=True)
class IntersectionSchema(Schema):
    """Accepts any value accepted by all of ``schemas``.

    Every member sees the same value and the same parent node. The first
    rejecting member's node is returned as is.
    """

    schemas: Tuple[Schema, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "schemas", tuple(self.schemas))

    def trace(self, value: Any, parent: DiagnosticNode = ROOT) -> DiagnosticNode:
        for schema in self.schemas:
            node = schema.trace(value, parent=parent)
            if not node.is_valid:
                return node
        return parent.validate("all schemas matched")

    def __str__(self) -> str:
        return describe_call("intersection", *self.schemas)

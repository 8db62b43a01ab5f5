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

"""Diagnostic nodes threaded through schema validation.

A node records where in an instance tree a verdict was reached and why.
Given the instance

    {"person": {"name": "John", "age": 30}}

the node for ``"John"`` lives at path ``person.name``:

    >>> node = ROOT.child("person").child("name")
    >>> node.path
    'person.name'
    >>> node.invalidate("expected int, found str").is_valid
    False

Nodes are immutable; every transition returns a new node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


PATH_SEPARATOR = "."
ROOT_LABEL = "<root>"


@dataclass(frozen=True)
class DiagnosticNode:
    # None (or empty) is the root of the instance tree.
    path: Optional[str] = None
    is_valid: bool = True
    # None means the node has not been judged yet.
    reason: Optional[str] = None

    def child(self, segment: str) -> "DiagnosticNode":
        """Return a node one level below this one, keeping the current verdict."""
        path = f"{self.path}{PATH_SEPARATOR}{segment}" if self.path else str(segment)
        return DiagnosticNode(path=path, is_valid=self.is_valid, reason=self.reason)

    def validate(self, reason: str) -> "DiagnosticNode":
        """Return an accepting node at the same path."""
        return DiagnosticNode(path=self.path, is_valid=True, reason=reason)

    def invalidate(self, reason: str) -> "DiagnosticNode":
        """Return a rejecting node at the same path."""
        return DiagnosticNode(path=self.path, is_valid=False, reason=reason)

    @property
    def is_root(self) -> bool:
        return not self.path

    def segments(self) -> tuple:
        if not self.path:
            return ()
        return tuple(self.path.split(PATH_SEPARATOR))

    def __str__(self) -> str:
        return f"{self.path or ROOT_LABEL}: {self.reason}"


ROOT = DiagnosticNode()

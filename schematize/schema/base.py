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

"""Abstract schema interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..debug_node import ROOT, DiagnosticNode
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


class Schema(ABC):
    """A rule tree that accepts or rejects an instance.

    Call :meth:`validate` for a plain verdict, or :meth:`trace` to get the
    :class:`DiagnosticNode` explaining where (``path``) and why (``reason``)
    the instance was rejected, or why it was accepted.

    Schemas are immutable values and may be shared between threads.
    """

    @abstractmethod
    def trace(self, value: Any, parent: DiagnosticNode = ROOT) -> DiagnosticNode:
        """Validate ``value`` below ``parent`` and return the resulting node.

        If ``parent`` is not provided the instance is treated as the root.
        Rejections are returned as data, never raised.
        """

    def validate(self, value: Any) -> bool:
        return self.trace(value).is_valid

    def check(self, value: Any) -> DiagnosticNode:
        """Like :meth:`trace`, but raise :class:`ValidationError` on rejection."""
        node = self.trace(value)
        if not node.is_valid:
            logger.debug(f"Instance rejected: {node}")
            raise ValidationError(node)
        return node


def describe_call(name: str, *args: Any, **options: Any) -> str:
    """Render a schema as ``name(arg, key=value)`` for diagnostics, skipping unset options."""
    parts = [str(arg) for arg in args]
    parts.extend(f"{key}={value!r}" for key, value in options.items() if value is not None)
    return f"{name}({', '.join(parts)})"

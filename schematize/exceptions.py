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

"""Custom exceptions for schematize.

Rejected instances are never reported through exceptions; they come back as
data on a :class:`~schematize.debug_node.DiagnosticNode`. The classes below
cover caller errors and the optional raising helpers only.
"""


class SchematizeError(Exception):
    """Base exception for schematize related errors."""
    pass


class SchemaDefinitionError(SchematizeError):
    """Exception raised when a schema is built with an unusable configuration."""
    pass


class SchemaReferenceError(SchematizeError):
    """Exception raised when a ``module:attribute`` schema reference cannot be resolved."""
    pass


class InstanceLoadError(SchematizeError):
    """Exception raised when an instance document cannot be read or parsed."""
    pass


class ValidationError(SchematizeError):
    """Exception raised by :meth:`Schema.check` when an instance is rejected."""

    def __init__(self, node):
        super().__init__(str(node))
        self.node = node

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

"""Structural validation of JSON-like values.

Build a schema from the variants below, then ask it about an instance::

    from schematize import ObjectSchema, OptionalSchema, StringSchema, TypeSchema

    person = ObjectSchema({
        "name": StringSchema(min_length=1),
        "age": TypeSchema(int),
        "email": OptionalSchema(StringSchema(pattern=r"@")),
    })
    person.validate({"name": "John", "age": 30})       # True
    node = person.trace({"name": "John", "age": "30"})
    print(node)                                       # age: expected int, found str
"""

__version__ = "0.1.0"

from .debug_node import ROOT, DiagnosticNode
from .exceptions import (
    InstanceLoadError,
    SchemaDefinitionError,
    SchemaReferenceError,
    SchematizeError,
    ValidationError,
)
from .schema import (
    ArraySchema,
    CollectionSchema,
    CustomSchema,
    EnumSchema,
    IntersectionSchema,
    NumberSchema,
    ObjectSchema,
    OptionalSchema,
    Schema,
    StringSchema,
    TypeSchema,
    UnionSchema,
)

__all__ = [
    "ROOT",
    "DiagnosticNode",
    "Schema",
    "TypeSchema",
    "StringSchema",
    "NumberSchema",
    "EnumSchema",
    "OptionalSchema",
    "UnionSchema",
    "IntersectionSchema",
    "ObjectSchema",
    "CollectionSchema",
    "ArraySchema",
    "CustomSchema",
    "SchematizeError",
    "SchemaDefinitionError",
    "SchemaReferenceError",
    "InstanceLoadError",
    "ValidationError",
]

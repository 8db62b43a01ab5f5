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

"""Schema variants.

The variant set is closed: every schema is one of the classes exported here.
"""

from .base import Schema
from .combinators import OPTIONAL_SEGMENT, IntersectionSchema, OptionalSchema, UnionSchema
from .containers import ArraySchema, CollectionSchema, ObjectSchema
from .scalars import CustomSchema, EnumSchema, NumberSchema, StringSchema, TypeSchema

__all__ = [
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
    "OPTIONAL_SEGMENT",
]

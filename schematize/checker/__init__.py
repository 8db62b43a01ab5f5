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

"""Check instance files against a schema defined in Python code."""

import importlib
import logging
from pathlib import Path
from typing import List, Optional

from ..exceptions import InstanceLoadError, SchemaReferenceError
from ..file_io.source_location import lookup_source
from ..parsing.instance_loader import InstanceLoader, instance_loader
from ..schema import Schema
from .report import CheckResult

__all__ = ['check_file', 'check_files', 'resolve_schema_reference', 'CheckResult']

logger = logging.getLogger(__name__)


def resolve_schema_reference(reference: str) -> Schema:
    """Import the schema named by ``package.module:attribute``.

    The attribute part may be dotted to reach nested attributes.

    Raises:
        SchemaReferenceError: If the reference is malformed, cannot be imported,
            or does not name a :class:`Schema`.
    """
    module_name, sep, attribute = reference.partition(':')
    if not sep or not module_name or not attribute:
        raise SchemaReferenceError(
            f"Invalid schema reference '{reference}'. Expected format: 'package.module:attribute'"
        )

    try:
        target = importlib.import_module(module_name)
    except ImportError as exc:
        raise SchemaReferenceError(f"Cannot import module '{module_name}': {exc}") from exc

    for name in attribute.split('.'):
        try:
            target = getattr(target, name)
        except AttributeError as exc:
            raise SchemaReferenceError(f"'{reference}' has no attribute '{name}'") from exc

    if not isinstance(target, Schema):
        raise SchemaReferenceError(
            f"'{reference}' is a {type(target).__name__}, not a schema"
        )
    logger.debug(f"Resolved schema reference {reference}: {target}")
    return target


def check_file(file_path: Path, schema: Schema, loader: Optional[InstanceLoader] = None) -> CheckResult:
    """Check one instance file.

    A rejected instance produces exactly one error: the first rejection found.
    """
    loader = loader or instance_loader
    result = CheckResult(file_path)

    try:
        instance, source_map = loader.load_with_source(file_path)
    except InstanceLoadError as e:
        result.add_error(str(e))
        return result

    if instance is None:
        result.add_warning("Document is empty; checking it as null")

    try:
        node = schema.trace(instance)
    except Exception as e:
        # custom predicates may raise; report them against the file
        result.add_error(f"Unexpected error during check: {type(e).__name__}: {e}")
        return result

    if node.is_valid:
        result.accepted_reason = node.reason
        logger.debug(f"{file_path}: accepted ({node.reason})")
        return result

    loc = lookup_source(source_map, node.path, file_path)
    result.add_error(node.reason, line=loc.line, column=loc.column, path=node.path)
    logger.debug(f"{file_path}: rejected at {node.path or '<root>'}")
    return result


def check_files(file_paths: List[Path], schema: Schema) -> List[CheckResult]:
    """Check a list of instance files against ``schema``.

    Args:
        file_paths: List of file paths to check
        schema: Schema every file must satisfy

    Returns:
        List of CheckResult objects, one per file
    """
    return [check_file(file_path, schema) for file_path in file_paths]

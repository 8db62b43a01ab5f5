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

"""Map diagnostic paths back to positions in instance files."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Dict, Optional

from ..debug_node import PATH_SEPARATOR
from ..schema import OPTIONAL_SEGMENT


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def to_document_path(path: Optional[str]) -> str:
    """Drop optional markers so a diagnostic path matches source map keys."""
    if not path:
        return ""
    segments = [s for s in path.split(PATH_SEPARATOR) if s != OPTIONAL_SEGMENT]
    return PATH_SEPARATOR.join(segments)


def lookup_source(
    source_map: Optional[Dict[str, Dict[str, int]]],
    path: Optional[str],
    file_path: Optional[Path] = None,
) -> SourceLocation:
    """Locate ``path`` in ``source_map``.

    A missing object key has no position of its own, so the closest ancestor
    that does is used instead.
    """
    if not source_map:
        return SourceLocation(file_path=file_path, path=path)

    candidate = to_document_path(path)
    while True:
        entry = source_map.get(candidate)
        if entry:
            return SourceLocation(
                file_path=file_path,
                path=path,
                line=entry.get("line"),
                column=entry.get("column"),
            )
        if not candidate:
            return SourceLocation(file_path=file_path, path=path)
        candidate = candidate.rpartition(PATH_SEPARATOR)[0]


def _format_file_path(path: Path) -> str:
    root = os.environ.get("SCHEMATIZE_SOURCE_ROOT")
    if not root:
        return str(path)
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        file_path = _format_file_path(loc.file_path)
        if loc.line is not None and loc.column is not None:
            parts.append(f"source={file_path}:{loc.line}:{loc.column}")
        elif loc.line is not None:
            parts.append(f"source={file_path}:{loc.line}")
        else:
            parts.append(f"source={file_path}")

    if loc.path:
        parts.append(f"path={loc.path}")

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"

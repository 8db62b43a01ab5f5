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

"""Instance document loader with source location tracking.

Instances are read from YAML files. JSON is a subset of YAML, so ``.json``
documents go through the same loader.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from ..config import checker_config
from ..debug_node import PATH_SEPARATOR
from ..exceptions import InstanceLoadError

logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]


class InstanceLoader:
    """Loads instance documents together with a source map.

    Source map keys are diagnostic paths in the same dotted form a
    :class:`~schematize.debug_node.DiagnosticNode` uses (``""`` for the
    document root, ``"people.0.name"`` below it); values hold the 1-based
    ``line`` and ``column`` where that value starts.
    """

    def __init__(self, cache_enabled: Optional[bool] = None):
        """Initialize the loader.

        Args:
            cache_enabled: Whether to cache loaded files. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else checker_config.cache_enabled
        self._cache: Dict[Path, Tuple[Any, SourceMap]] = {}

    @staticmethod
    def _join(path: str, segment: str) -> str:
        return f"{path}{PATH_SEPARATOR}{segment}" if path else segment

    @classmethod
    def build_source_map(cls, content: str) -> SourceMap:
        """Map diagnostic paths to 1-based line/column using PyYAML's node tree.

        ``yaml.compose`` keeps the marks that ``safe_load`` discards, so the
        data shapes returned by :meth:`load` are unaffected.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            # Parse errors are reported by load(); no locations without a tree.
            return source_map

        if root is None:
            return source_map

        # Keys are constructed the way safe_load constructs them so that
        # ``on:`` maps to "True" and ``0x1:`` to "1", matching the labels
        # a loaded mapping produces.
        constructor = yaml.SafeLoader("")
        visited = set()

        def _key_text(key_node) -> str:
            try:
                return str(constructor.construct_object(key_node, deep=True))
            except yaml.YAMLError:
                return str(key_node.value)

        def _walk(node, path: str) -> None:
            mark = node.start_mark
            # PyYAML marks are 0-based
            source_map[path] = {"line": mark.line + 1, "column": mark.column + 1}

            # Aliases share their anchor's node; each node is expanded once so
            # self-referencing anchors terminate.
            if id(node) in visited:
                return
            visited.add(id(node))

            if isinstance(node, yaml.MappingNode):
                for key_node, value_node in node.value:
                    _walk(value_node, cls._join(path, _key_text(key_node)))
            elif isinstance(node, yaml.SequenceNode):
                for index, item_node in enumerate(node.value):
                    _walk(item_node, cls._join(path, str(index)))

        try:
            _walk(root, "")
        finally:
            constructor.dispose()
        return source_map

    def load_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load an instance file and return ``(instance, source_map)``.

        An empty document loads as ``None``.

        Raises:
            InstanceLoadError: If the file is missing, unreadable or not valid YAML/JSON.
        """
        path = Path(file_path)

        if not path.exists():
            raise InstanceLoadError(f"Instance file not found: {path}")

        if not path.is_file():
            raise InstanceLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading instance from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading instance file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InstanceLoadError(f"Failed to read instance file {path}: {exc}") from exc

        instance, source_map = self.load_from_string_with_source(content, origin=str(path))

        if self.cache_enabled:
            self._cache[path] = (instance, source_map)
        return instance, source_map

    def load_from_string_with_source(self, content: str, origin: str = "<string>") -> Tuple[Any, SourceMap]:
        """Load an instance from string content and return ``(instance, source_map)``."""
        try:
            instance = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise InstanceLoadError(f"Failed to parse instance document {origin}: {exc}") from exc
        return instance, self.build_source_map(content)

    def load(self, file_path: Union[str, Path]) -> Any:
        """Load an instance file without its source map."""
        instance, _ = self.load_with_source(file_path)
        return instance

    def clear_cache(self) -> None:
        """Clear the loader cache."""
        self._cache.clear()
        logger.debug("Instance loader cache cleared")


# Global loader instance
instance_loader = InstanceLoader()

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

"""Per-file results of a schema check."""

from pathlib import Path
from typing import List, Dict, Any, Optional


class CheckResult:
    """Container for the check result of a single instance file."""

    def __init__(self, file_path: Path):
        """Initialize check result.

        Args:
            file_path: Path to the instance file being checked
        """
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []
        # Reason of the accepting node, set when the instance passed.
        self.accepted_reason: Optional[str] = None

    @staticmethod
    def _entry(
        message: str,
        line: Optional[int],
        column: Optional[int],
        path: Optional[str],
    ) -> Dict[str, Any]:
        entry: Dict[str, Any] = {'message': message}
        if line is not None:
            entry['line'] = line
        if column is not None:
            entry['column'] = column
        if path is not None:
            entry['path'] = path
        return entry

    def add_error(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        path: Optional[str] = None,
    ):
        """Add an error message.

        Args:
            message: Error message
            line: Optional line number where the rejected value starts
            column: Optional column number where the rejected value starts
            path: Optional diagnostic path of the rejected value
        """
        self.errors.append(self._entry(message, line, column, path))

    def add_warning(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        path: Optional[str] = None,
    ):
        """Add a warning message."""
        self.warnings.append(self._entry(message, line, column, path))

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'errors': self.errors,
            'warnings': self.warnings,
        }

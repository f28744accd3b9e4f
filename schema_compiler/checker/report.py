# Copyright 2026 TIER IV, inc.
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

"""Error reporting for the document checker."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ..utils.source_location import SourceLocation


class CheckResult:
    """Container for check results for a single document."""

    def __init__(self, file_path: Path):
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    @staticmethod
    def _entry(
        message: str,
        line: Optional[int],
        column: Optional[int],
        pointer: Optional[str],
    ) -> Dict[str, Any]:
        entry: Dict[str, Any] = {'message': message}
        if line is not None:
            entry['line'] = line
        if column is not None:
            entry['column'] = column
        if pointer is not None:
            entry['pointer'] = pointer
        return entry

    def add_error(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        pointer: Optional[str] = None,
    ):
        """Add an error message.

        Args:
            message: Error message
            line: Optional 1-based line where the error occurred
            column: Optional 1-based column
            pointer: Optional JSON pointer of the offending value
        """
        self.errors.append(self._entry(message, line, column, pointer))

    def add_warning(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        pointer: Optional[str] = None,
    ):
        self.warnings.append(self._entry(message, line, column, pointer))

    def location(self, entry: Dict[str, Any]) -> SourceLocation:
        return SourceLocation(
            file_path=self.file_path,
            pointer=entry.get('pointer'),
            line=entry.get('line'),
            column=entry.get('column'),
        )

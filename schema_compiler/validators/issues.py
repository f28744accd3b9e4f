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

"""Validation result types shared by every validator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple


JsonPointer = str


class _Missing:
    """Marker for an absent value (a missing object key or no input at all)."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo) -> "_Missing":
        return self


MISSING: Any = _Missing()


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    path: JsonPointer = ""
    code: str = "custom"

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of :meth:`Validator.validate`.

    ``value`` holds the validated output (with defaults filled in) when ``ok``
    is true; ``issues`` lists every problem found otherwise.
    """

    ok: bool
    value: Any = None
    issues: Tuple[SchemaIssue, ...] = ()

    def __bool__(self) -> bool:
        return self.ok


def jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def join_path(base: Optional[JsonPointer], token: Any) -> JsonPointer:
    if not base:
        return f"/{jp_escape(str(token))}"
    return f"{base}/{jp_escape(str(token))}"

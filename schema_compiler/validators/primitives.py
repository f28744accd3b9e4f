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

"""Validators for scalar kinds and binary file values."""

import io
import math
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .base import CheckResult, PresentValidator, type_issue
from .issues import JsonPointer, SchemaIssue
from .values import BYTES_TYPES, is_file_value


@dataclass(frozen=True)
class StringValidator(PresentValidator):
    def _check_present(self, value: Any, path: JsonPointer) -> CheckResult:
        if not isinstance(value, str):
            return value, [type_issue("string", value, path)]
        return value, []


@dataclass(frozen=True)
class NumberValidator(PresentValidator):
    """Accepts finite ints and floats; booleans are not numbers."""

    def _check_present(self, value: Any, path: JsonPointer) -> CheckResult:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return value, [type_issue("number", value, path)]
        if isinstance(value, float) and not math.isfinite(value):
            return value, [SchemaIssue(message="Number must be finite", path=path, code="not_finite")]
        return value, []


@dataclass(frozen=True)
class BooleanValidator(PresentValidator):
    def _check_present(self, value: Any, path: JsonPointer) -> CheckResult:
        if not isinstance(value, bool):
            return value, [type_issue("boolean", value, path)]
        return value, []


@dataclass(frozen=True)
class NullValidator(PresentValidator):
    def _check_present(self, value: Any, path: JsonPointer) -> CheckResult:
        if value is not None:
            return value, [type_issue("null", value, path)]
        return value, []


def file_size(value: Any) -> Optional[int]:
    """Size in bytes of a bytes-like value or binary file object, if known."""
    if isinstance(value, memoryview):
        return value.nbytes
    if isinstance(value, BYTES_TYPES):
        return len(value)

    size = getattr(value, "size", None)
    if isinstance(size, int):
        return size

    try:
        position = value.tell()
        value.seek(0, io.SEEK_END)
        end = value.tell()
        value.seek(position)
    except (AttributeError, OSError, ValueError):
        return None
    return end


def file_media_type(value: Any) -> Optional[str]:
    raw = getattr(value, "content_type", None) or getattr(value, "mimetype", None)
    if not isinstance(raw, str):
        return None
    return raw.split(";", 1)[0].strip().lower()


@dataclass(frozen=True)
class FileValidator(PresentValidator):
    """Binary content: ``bytes``-like values or binary file objects.

    ``media_types`` only matches values that report a content type, so raw
    bytes never satisfy a MIME constraint.
    """

    min_size: Optional[int] = None
    max_size: Optional[int] = None
    media_types: Tuple[str, ...] = ()

    def _check_present(self, value: Any, path: JsonPointer) -> CheckResult:
        if not is_file_value(value):
            return value, [type_issue("file", value, path)]

        issues: List[SchemaIssue] = []
        if self.min_size is not None or self.max_size is not None:
            size = file_size(value)
            if size is None:
                issues.append(SchemaIssue(message="File size cannot be determined", path=path, code="invalid_file"))
            elif self.min_size is not None and size < self.min_size:
                issues.append(
                    SchemaIssue(message=f"File must be at least {self.min_size} bytes", path=path, code="too_small")
                )
            elif self.max_size is not None and size > self.max_size:
                issues.append(
                    SchemaIssue(message=f"File must be at most {self.max_size} bytes", path=path, code="too_big")
                )

        if self.media_types:
            media_type = file_media_type(value)
            if media_type not in {m.lower() for m in self.media_types}:
                expected = " | ".join(self.media_types)
                issues.append(
                    SchemaIssue(message=f"Invalid media type: expected {expected}", path=path, code="invalid_type")
                )
        return value, issues

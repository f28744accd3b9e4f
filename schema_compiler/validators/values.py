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

"""JSON value helpers: kind detection and structural equality."""

import io
from typing import Any, Optional

BYTES_TYPES = (bytes, bytearray, memoryview)


def is_file_value(value: Any) -> bool:
    """True for raw bytes and binary file objects."""
    if isinstance(value, BYTES_TYPES):
        return True
    if isinstance(value, (io.RawIOBase, io.BufferedIOBase)):
        return True
    # Upload wrappers (werkzeug, starlette, django) expose read() and a content type.
    return callable(getattr(value, "read", None)) and (
        hasattr(value, "content_type") or hasattr(value, "mimetype")
    )


def json_kind(value: Any) -> Optional[str]:
    """Return the JSON kind name of a Python value, or None if it has none.

    ``bool`` is checked before numbers because it subclasses ``int``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    if is_file_value(value):
        return "file"
    return None


def json_equal(left: Any, right: Any) -> bool:
    """Structural equality with JSON semantics.

    Arrays compare element-wise in order, objects by key set and values,
    numbers by value (``1 == 1.0``), and booleans never equal numbers.
    """
    left_kind = json_kind(left)
    right_kind = json_kind(right)
    if left_kind != right_kind:
        return False

    if left_kind == "array":
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))

    if left_kind == "object":
        if left.keys() != right.keys():
            return False
        return all(json_equal(left[key], right[key]) for key in left)

    return left == right

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

"""Predicates and helpers shared by the handlers."""

from decimal import Decimal, InvalidOperation, localcontext
from typing import Any, Union

import regex

from ..exceptions import SchemaConstructionError
from ..validators import json_equal

Number = Union[int, float]

_GRAPHEME_RE = regex.compile(r"\X")


def grapheme_length(value: str) -> int:
    """Number of user-perceived characters (extended grapheme clusters)."""
    return len(_GRAPHEME_RE.findall(value))


def compile_pattern(pattern: str) -> "regex.Pattern":
    """Compile a schema ``pattern``.

    Raises:
        SchemaConstructionError: If the pattern is not a valid regular expression.
    """
    try:
        return regex.compile(pattern)
    except (regex.error, TypeError) as exc:
        raise SchemaConstructionError(f"Invalid pattern {pattern!r}: {exc}") from exc


def is_integral(value: Number) -> bool:
    if isinstance(value, int):
        return True
    return float(value).is_integer()


def is_multiple_of(value: Number, divisor: Number) -> bool:
    """Exact divisibility test.

    Floats are compared through their shortest decimal representation, so
    ``0.0075`` is a multiple of ``0.0001``. A zero divisor matches nothing.
    """
    if divisor == 0:
        return False
    if isinstance(value, int) and isinstance(divisor, int):
        return value % divisor == 0

    try:
        dividend = Decimal(str(value))
        step = Decimal(str(divisor))
        with localcontext() as ctx:
            ctx.prec = max(28, dividend.adjusted() - step.adjusted() + 28)
            return dividend % step == 0
    except InvalidOperation:
        return False


def has_unique_items(value: Any) -> bool:
    """True unless ``value`` is a list holding two structurally equal items."""
    if not isinstance(value, list):
        return True

    seen = []
    for item in value:
        if any(json_equal(item, previous) for previous in seen):
            return False
        seen.append(item)
    return True

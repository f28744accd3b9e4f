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

"""Numeric range and divisibility keywords.

Draft-04 style ``exclusiveMinimum: true`` / ``exclusiveMaximum: true`` make
the matching ``minimum`` / ``maximum`` strict; boolean exclusive bounds carry
no limit of their own.
"""

from typing import Any, Mapping

from ...core.types import AdmissibilityState, Convert, Kind, PrimitiveHandler
from ...core.utils import is_multiple_of


def _is_bound(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class MinimumHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        limit = schema.get("minimum")
        if not _is_bound(limit):
            return
        if schema.get("exclusiveMinimum") is True:
            types.update(Kind.NUMBER, lambda v: v.refine(lambda n: n > limit, f"Number must be greater than {limit}"))
        else:
            types.update(
                Kind.NUMBER,
                lambda v: v.refine(lambda n: n >= limit, f"Number must be greater than or equal to {limit}"),
            )


class MaximumHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        limit = schema.get("maximum")
        if not _is_bound(limit):
            return
        if schema.get("exclusiveMaximum") is True:
            types.update(Kind.NUMBER, lambda v: v.refine(lambda n: n < limit, f"Number must be less than {limit}"))
        else:
            types.update(
                Kind.NUMBER,
                lambda v: v.refine(lambda n: n <= limit, f"Number must be less than or equal to {limit}"),
            )


class ExclusiveMinimumHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        limit = schema.get("exclusiveMinimum")
        if not _is_bound(limit):
            return
        types.update(Kind.NUMBER, lambda v: v.refine(lambda n: n > limit, f"Number must be greater than {limit}"))


class ExclusiveMaximumHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        limit = schema.get("exclusiveMaximum")
        if not _is_bound(limit):
            return
        types.update(Kind.NUMBER, lambda v: v.refine(lambda n: n < limit, f"Number must be less than {limit}"))


class MultipleOfHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        divisor = schema.get("multipleOf")
        if not _is_bound(divisor):
            return
        types.update(
            Kind.NUMBER,
            lambda v: v.refine(lambda n: is_multiple_of(n, divisor), f"Number must be a multiple of {divisor}"),
        )

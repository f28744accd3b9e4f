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

"""Array keywords, including the positional (tuple) form of ``items``."""

import logging
from typing import Any, Mapping, Optional

from ...core.types import AdmissibilityState, Convert, Kind, PrimitiveHandler
from ...validators import AnyValidator, ArrayValidator, TupleValidator, Validator, intersection

logger = logging.getLogger(__name__)

ARRAY_KEYWORDS = ("minItems", "maxItems", "items", "prefixItems")


def _with_bounds(validator: Validator, min_items: Optional[int] = None, max_items: Optional[int] = None) -> Validator:
    if isinstance(validator, ArrayValidator):
        return validator.with_bounds(min_items=min_items, max_items=max_items)
    if min_items is not None:
        return validator.refine(lambda a: len(a) >= min_items, f"Array must contain at least {min_items} item(s)")
    return validator.refine(lambda a: len(a) <= max_items, f"Array must contain at most {max_items} item(s)")


class ImplicitArrayHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        if "type" in schema or not any(key in schema for key in ARRAY_KEYWORDS):
            return
        if isinstance(schema.get("items"), list):
            # The tuple handler decides between tuple and array.
            return
        if types.is_open(Kind.ARRAY):
            types.set(Kind.ARRAY, ArrayValidator())


class TupleHandler(PrimitiveHandler):
    """List-valued ``items`` selects the tuple kind instead of the array kind.

    Without ``additionalItems`` the tuple has exactly ``N`` elements, so
    ``minItems > N`` or ``maxItems < N`` can never be satisfied and the tuple
    kind is dropped.
    """

    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        items = schema.get("items")
        if not isinstance(items, list) or types.is_disabled(Kind.ARRAY):
            return

        positional = tuple(convert(item) for item in items)
        additional = schema.get("additionalItems")
        rest: Optional[Validator] = None
        if additional is True:
            rest = AnyValidator()
        elif isinstance(additional, Mapping):
            rest = convert(additional)

        min_items = schema.get("minItems")
        max_items = schema.get("maxItems")
        size = len(positional)
        impossible = rest is None and (
            (min_items is not None and min_items > size) or (max_items is not None and max_items < size)
        )

        if impossible:
            logger.debug(f"Tuple of {size} item(s) cannot satisfy minItems={min_items}, maxItems={max_items}")
            types.disable(Kind.TUPLE)
        else:
            types.set(Kind.TUPLE, TupleValidator(positional, rest=rest, min_items=min_items, max_items=max_items))
        types.disable(Kind.ARRAY)


class MinItemsHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        limit = schema.get("minItems")
        if limit is None:
            return
        types.update(Kind.ARRAY, lambda v: _with_bounds(v, min_items=limit))


class MaxItemsHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        limit = schema.get("maxItems")
        if limit is None:
            return
        types.update(Kind.ARRAY, lambda v: _with_bounds(v, max_items=limit))


class ItemsHandler(PrimitiveHandler):
    """Single-schema ``items``.

    With ``prefixItems`` present the element checks are left to the prefix
    refinement and only a generic array is kept here.
    """

    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        if "items" not in schema or types.is_disabled(Kind.ARRAY):
            return

        items = schema["items"]
        if isinstance(items, list):
            return
        has_prefix = "prefixItems" in schema

        if items is False and not has_prefix:
            types.update(Kind.ARRAY, lambda v: _with_bounds(v, max_items=0))
        elif isinstance(items, Mapping) and not has_prefix:
            element = convert(items)
            types.update(Kind.ARRAY, lambda v: _with_element(v, element))
        else:
            types.update(Kind.ARRAY, lambda v: v)


def _with_element(validator: Validator, element: Validator) -> Validator:
    if isinstance(validator, ArrayValidator):
        return validator.with_element(element)
    return intersection(validator, ArrayValidator(element=element))

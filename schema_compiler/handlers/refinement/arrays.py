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

"""Array refinements. Values that are not lists always pass them."""

from typing import Any, Mapping, Optional

from ...core.types import Convert, RefinementHandler
from ...core.utils import has_unique_items
from ...validators import Validator


class PrefixItemsHandler(RefinementHandler):
    """Positional ``prefixItems``; elements past the prefix follow ``items``."""

    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        prefix = schema.get("prefixItems")
        if not isinstance(prefix, list):
            return validator

        positional = [convert(item) for item in prefix]
        items = schema.get("items")
        reject_extra = items is False
        extra: Optional[Validator] = convert(items) if isinstance(items, Mapping) else None

        def check(value: Any) -> bool:
            if not isinstance(value, list):
                return True
            for item_validator, item in zip(positional, value):
                if not item_validator.is_valid(item):
                    return False
            extras = value[len(positional):]
            if not extras:
                return True
            if reject_extra:
                return False
            if extra is not None:
                return all(extra.is_valid(item) for item in extras)
            return True

        return validator.refine(check, "Array does not match prefixItems")


class ContainsHandler(RefinementHandler):
    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        if "contains" not in schema:
            return validator

        contains = convert(schema["contains"])
        min_contains = schema.get("minContains", 1)
        max_contains = schema.get("maxContains")

        def check(value: Any) -> bool:
            if not isinstance(value, list):
                return True
            matches = sum(1 for item in value if contains.is_valid(item))
            if matches < min_contains:
                return False
            return max_contains is None or matches <= max_contains

        return validator.refine(check, "Array does not contain the required number of matching items")


class UniqueItemsHandler(RefinementHandler):
    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        if schema.get("uniqueItems") is not True:
            return validator
        return validator.refine(has_unique_items, "Array items must be unique")

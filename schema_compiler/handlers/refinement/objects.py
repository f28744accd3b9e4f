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

"""Object refinements. Values that are not dicts always pass them."""

import logging
from typing import Any, List, Mapping, Optional, Tuple

from ...core.types import Convert, RefinementHandler
from ...core.utils import compile_pattern
from ...exceptions import SchemaConstructionError
from ...validators import AnyValidator, Validator

logger = logging.getLogger(__name__)


class ProtoRequiredHandler(RefinementHandler):
    """``required`` naming ``__proto__`` on an untyped schema.

    The key is checked as an ordinary own key of the dict.
    """

    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        required = schema.get("required")
        if not isinstance(required, list) or "__proto__" not in required or "type" in schema:
            return validator

        names = tuple(required)
        return AnyValidator().refine(
            lambda value: not isinstance(value, dict) or all(name in value for name in names),
            "Missing required properties",
        )


class PatternPropertiesHandler(RefinementHandler):
    """Keys not declared in ``properties`` are checked against every matching
    pattern; keys no pattern matches follow ``additionalProperties``."""

    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        patterns = schema.get("patternProperties")
        if not isinstance(patterns, Mapping):
            return validator

        compiled: List[Tuple[Any, Validator]] = []
        for pattern, sub_schema in patterns.items():
            try:
                matcher = compile_pattern(pattern)
            except SchemaConstructionError as exc:
                logger.debug(f"Skipping patternProperties entry: {exc}")
                continue
            compiled.append((matcher, convert(sub_schema)))

        properties = schema.get("properties")
        declared = set(properties) if isinstance(properties, Mapping) else set()
        additional = schema.get("additionalProperties")
        reject_unmatched = additional is False
        unmatched: Optional[Validator] = convert(additional) if isinstance(additional, Mapping) else None

        def check(value: Any) -> bool:
            if not isinstance(value, dict):
                return True
            for key, item in value.items():
                if key in declared:
                    continue
                matched = [sub for matcher, sub in compiled if matcher.search(str(key))]
                if matched:
                    if not all(sub.is_valid(item) for sub in matched):
                        return False
                elif reject_unmatched:
                    return False
                elif unmatched is not None and not unmatched.is_valid(item):
                    return False
            return True

        return validator.refine(check, "Object properties do not match patternProperties")

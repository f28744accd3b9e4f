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

"""Deep-equality checks for list and dict literals in ``const``/``enum``."""

from typing import Any, Mapping

from ...core.types import Convert, RefinementHandler
from ...validators import Validator, json_equal

COMPOSITE = (list, dict)


class EnumComplexHandler(RefinementHandler):
    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        values = schema.get("enum")
        if not isinstance(values, list):
            return validator
        members = [value for value in values if isinstance(value, COMPOSITE)]
        if not members:
            return validator

        def matches(value: Any) -> bool:
            if not isinstance(value, COMPOSITE):
                return True
            return any(json_equal(value, member) for member in members)

        return validator.refine(matches, "Invalid enum value")


class ConstComplexHandler(RefinementHandler):
    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        if "const" not in schema or not isinstance(schema["const"], COMPOSITE):
            return validator
        expected = schema["const"]
        return validator.refine(lambda value: json_equal(value, expected), "Value must equal the constant")

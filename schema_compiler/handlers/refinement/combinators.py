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

"""Logical composition: ``allOf``, ``anyOf``, ``oneOf`` and ``not``."""

from typing import Any, List, Mapping

from ...core.types import Convert, RefinementHandler
from ...validators import Validator, intersection, union


def _branches(schema: Mapping[str, Any], keyword: str, convert: Convert) -> List[Validator]:
    raw = schema.get(keyword)
    if not isinstance(raw, list):
        return []
    return [convert(branch) for branch in raw]


class AllOfHandler(RefinementHandler):
    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        for branch in _branches(schema, "allOf", convert):
            validator = intersection(validator, branch)
        return validator


class AnyOfHandler(RefinementHandler):
    keyword = "anyOf"

    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        branches = _branches(schema, self.keyword, convert)
        if not branches:
            return validator
        return intersection(validator, union(*branches))


class OneOfHandler(AnyOfHandler):
    """Treated like ``anyOf``: a value matching several branches is accepted."""

    keyword = "oneOf"


class NotHandler(RefinementHandler):
    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        if "not" not in schema:
            return validator
        negated = convert(schema["not"])
        return validator.refine(lambda value: not negated.is_valid(value), "Value must not match the negated schema")

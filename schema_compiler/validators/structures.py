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

"""Array, tuple and object validators."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from .base import AnyValidator, CheckResult, PresentValidator, Validator, type_issue
from .issues import MISSING, JsonPointer, SchemaIssue, join_path


def _length_issues(
    length: int, min_items: Optional[int], max_items: Optional[int], path: JsonPointer
) -> List[SchemaIssue]:
    if min_items is not None and length < min_items:
        return [SchemaIssue(message=f"Array must contain at least {min_items} item(s)", path=path, code="too_small")]
    if max_items is not None and length > max_items:
        return [SchemaIssue(message=f"Array must contain at most {max_items} item(s)", path=path, code="too_big")]
    return []


@dataclass(frozen=True)
class ArrayValidator(PresentValidator):
    """Homogeneous list with optional length bounds."""

    element: Validator = field(default_factory=AnyValidator)
    min_items: Optional[int] = None
    max_items: Optional[int] = None

    def with_bounds(self, min_items: Optional[int] = None, max_items: Optional[int] = None) -> "ArrayValidator":
        return replace(
            self,
            min_items=self.min_items if min_items is None else min_items,
            max_items=self.max_items if max_items is None else max_items,
        )

    def with_element(self, element: Validator) -> "ArrayValidator":
        return replace(self, element=element)

    def _check_present(self, value: Any, path: JsonPointer) -> CheckResult:
        if not isinstance(value, list):
            return value, [type_issue("array", value, path)]

        issues = _length_issues(len(value), self.min_items, self.max_items, path)
        output = []
        for idx, item in enumerate(value):
            item_output, item_issues = self.element._check(item, join_path(path, idx))
            issues.extend(item_issues)
            output.append(item_output)
        return output, issues


@dataclass(frozen=True)
class TupleValidator(PresentValidator):
    """Positionally typed list.

    Without ``rest`` the list must have exactly ``len(items)`` elements; with
    ``rest`` every element beyond the positional ones is checked against it.
    """

    items: Tuple[Validator, ...]
    rest: Optional[Validator] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None

    def _check_present(self, value: Any, path: JsonPointer) -> CheckResult:
        if not isinstance(value, list):
            return value, [type_issue("array", value, path)]

        size = len(self.items)
        if self.rest is None and len(value) != size:
            return value, [
                SchemaIssue(
                    message=f"Array must contain exactly {size} item(s)",
                    path=path,
                    code="too_small" if len(value) < size else "too_big",
                )
            ]
        if len(value) < size:
            return value, [
                SchemaIssue(message=f"Array must contain at least {size} item(s)", path=path, code="too_small")
            ]

        issues = _length_issues(len(value), self.min_items, self.max_items, path)
        output = []
        for idx, item in enumerate(value):
            validator = self.items[idx] if idx < size else self.rest
            item_output, item_issues = validator._check(item, join_path(path, idx))
            issues.extend(item_issues)
            output.append(item_output)
        return output, issues


class AdditionalKeys(Enum):
    """Policy for keys that are not declared fields."""

    STRICT = "strict"
    PASSTHROUGH = "passthrough"


@dataclass(frozen=True)
class FieldSpec:
    validator: Validator
    required: bool = False


@dataclass(frozen=True)
class ObjectValidator(PresentValidator):
    """Dict with declared fields and a policy for the remaining keys.

    ``additional`` is either an :class:`AdditionalKeys` policy or a catch-all
    validator applied to every undeclared key.
    """

    fields: Dict[str, FieldSpec] = field(default_factory=dict)
    additional: Union[AdditionalKeys, Validator] = AdditionalKeys.PASSTHROUGH
    min_properties: Optional[int] = None
    max_properties: Optional[int] = None

    def with_bounds(
        self, min_properties: Optional[int] = None, max_properties: Optional[int] = None
    ) -> "ObjectValidator":
        return replace(
            self,
            min_properties=self.min_properties if min_properties is None else min_properties,
            max_properties=self.max_properties if max_properties is None else max_properties,
        )

    def _check_present(self, value: Any, path: JsonPointer) -> CheckResult:
        if not isinstance(value, dict):
            return value, [type_issue("object", value, path)]

        issues: List[SchemaIssue] = []
        output: Dict[Any, Any] = {}

        # Counted on the input, before defaults are filled in.
        if self.min_properties is not None and len(value) < self.min_properties:
            issues.append(
                SchemaIssue(
                    message=f"Object must have at least {self.min_properties} properties",
                    path=path,
                    code="too_small",
                )
            )
        if self.max_properties is not None and len(value) > self.max_properties:
            issues.append(
                SchemaIssue(
                    message=f"Object must have at most {self.max_properties} properties",
                    path=path,
                    code="too_big",
                )
            )

        for key, item in value.items():
            key_path = join_path(path, key)
            field_spec = self.fields.get(key)
            if field_spec is not None:
                item_output, item_issues = field_spec.validator._check(item, key_path)
                issues.extend(item_issues)
                output[key] = item_output
            elif self.additional is AdditionalKeys.STRICT:
                issues.append(SchemaIssue(message=f"Unknown field '{key}'", path=key_path, code="unrecognized_keys"))
            elif self.additional is AdditionalKeys.PASSTHROUGH:
                output[key] = item
            else:
                item_output, item_issues = self.additional._check(item, key_path)
                issues.extend(item_issues)
                output[key] = item_output

        for name, field_spec in self.fields.items():
            if name in value:
                continue
            item_output, item_issues = field_spec.validator._check(MISSING, join_path(path, name))
            if not item_issues and item_output is not MISSING:
                output[name] = item_output
            elif field_spec.required:
                issues.append(
                    SchemaIssue(message=f"Missing required field '{name}'", path=join_path(path, name), code="required")
                )
        return output, issues

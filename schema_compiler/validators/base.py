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

"""Validator base class and the generic combinators.

Every validator is an immutable object. Combinator methods (``refine``,
``optional``, ``default``, ``describe``) never mutate the receiver; they return
a new validator wrapping it.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from ..exceptions import SchemaValidationError
from .issues import MISSING, JsonPointer, SchemaIssue, ValidationResult
from .values import json_equal, json_kind


CheckResult = Tuple[Any, List[SchemaIssue]]
Predicate = Callable[[Any], bool]


def required_issue(path: JsonPointer) -> SchemaIssue:
    return SchemaIssue(message="Required", path=path, code="required")


def type_issue(expected: str, value: Any, path: JsonPointer) -> SchemaIssue:
    actual = json_kind(value) or type(value).__name__
    return SchemaIssue(
        message=f"Invalid type: expected {expected}, got {actual}",
        path=path,
        code="invalid_type",
    )


class Validator(ABC):
    """Abstract composable validator."""

    @property
    def description(self) -> Optional[str]:
        return None

    @abstractmethod
    def _check(self, value: Any, path: JsonPointer) -> CheckResult:
        """Check ``value`` located at ``path``.

        Returns the output value and the list of issues found; the output is
        only meaningful when the list is empty.
        """

    def validate(self, value: Any = MISSING) -> ValidationResult:
        """Validate a value; calling with no argument validates an absent value."""
        output, issues = self._check(value, "")
        if issues:
            return ValidationResult(ok=False, issues=tuple(issues))
        return ValidationResult(ok=True, value=output)

    def is_valid(self, value: Any = MISSING) -> bool:
        return not self._check(value, "")[1]

    def parse(self, value: Any = MISSING) -> Any:
        """Validate and return the output value.

        Raises:
            SchemaValidationError: If validation fails.
        """
        result = self.validate(value)
        if not result.ok:
            raise SchemaValidationError(result.issues)
        return result.value

    def refine(self, predicate: Predicate, message: str = "Invalid value") -> "RefinedValidator":
        return RefinedValidator(self, predicate, message)

    def optional(self) -> "OptionalValidator":
        return OptionalValidator(self)

    def default(self, value: Any) -> "DefaultedValidator":
        return DefaultedValidator(self, value)

    def describe(self, description: str) -> "DescribedValidator":
        return DescribedValidator(self, description)


class PresentValidator(Validator):
    """Base for validators that require a value to be present."""

    def _check(self, value: Any, path: JsonPointer) -> CheckResult:
        if value is MISSING:
            return value, [required_issue(path)]
        return self._check_present(value, path)

    @abstractmethod
    def _check_present(self, value: Any, path: JsonPointer) -> CheckResult:
        pass


@dataclass(frozen=True)
class AnyValidator(Validator):
    """Accepts everything, including an absent value."""

    def _check(self, value: Any, path: JsonPointer) -> CheckResult:
        return value, []


@dataclass(frozen=True)
class NeverValidator(Validator):
    def _check(self, value: Any, path: JsonPointer) -> CheckResult:
        return value, [SchemaIssue(message="No value is allowed here", path=path, code="never")]


@dataclass(frozen=True)
class LiteralValidator(PresentValidator):
    literal: Any

    def _check_present(self, value: Any, path: JsonPointer) -> CheckResult:
        if json_equal(value, self.literal):
            return value, []
        return value, [
            SchemaIssue(
                message=f"Invalid literal value, expected {self.literal!r}",
                path=path,
                code="invalid_literal",
            )
        ]


@dataclass(frozen=True)
class EnumValidator(PresentValidator):
    """Exact match against a fixed set of values."""

    values: Tuple[Any, ...]

    def _check_present(self, value: Any, path: JsonPointer) -> CheckResult:
        if any(json_equal(value, allowed) for allowed in self.values):
            return value, []
        expected = ", ".join(repr(v) for v in self.values)
        return value, [
            SchemaIssue(
                message=f"Invalid enum value. Expected one of: {expected}",
                path=path,
                code="invalid_enum_value",
            )
        ]


@dataclass(frozen=True)
class RefinedValidator(Validator):
    """Runs ``inner`` and then a predicate on its output."""

    inner: Validator
    predicate: Predicate
    message: str = "Invalid value"

    def _check(self, value: Any, path: JsonPointer) -> CheckResult:
        output, issues = self.inner._check(value, path)
        if issues:
            return output, issues
        if not self.predicate(output):
            return output, [SchemaIssue(message=self.message, path=path, code="custom")]
        return output, []


@dataclass(frozen=True)
class OptionalValidator(Validator):
    """Accepts an absent value in place of ``inner``.

    The compiler expresses optional fields through ``FieldSpec.required``;
    this wrapper is for validators built by hand with ``Validator.optional()``.
    """

    inner: Validator

    def _check(self, value: Any, path: JsonPointer) -> CheckResult:
        if value is MISSING:
            output, issues = self.inner._check(value, path)
            if not issues:
                return output, []
            return MISSING, []
        return self.inner._check(value, path)


@dataclass(frozen=True)
class DefaultedValidator(Validator):
    """Substitutes ``default_value`` when the input is absent."""

    inner: Validator
    default_value: Any

    def _check(self, value: Any, path: JsonPointer) -> CheckResult:
        if value is MISSING:
            return copy.deepcopy(self.default_value), []
        return self.inner._check(value, path)


@dataclass(frozen=True)
class DescribedValidator(Validator):
    inner: Validator
    text: str

    @property
    def description(self) -> Optional[str]:
        return self.text

    def _check(self, value: Any, path: JsonPointer) -> CheckResult:
        return self.inner._check(value, path)


def _tag_matches(tag: str, kind: Optional[str]) -> bool:
    if tag == "tuple":
        return kind == "array"
    return tag == kind


@dataclass(frozen=True)
class UnionValidator(Validator):
    """First matching option wins.

    When ``tags`` is given it names the value kind handled by each option, so
    only the options for the input's kind are tried and type mismatches are
    reported as a single issue.
    """

    options: Tuple[Validator, ...]
    tags: Tuple[str, ...] = field(default=())

    def _check(self, value: Any, path: JsonPointer) -> CheckResult:
        candidates = list(self.options)
        if self.tags and value is not MISSING:
            kind = json_kind(value)
            candidates = [opt for opt, tag in zip(self.options, self.tags) if _tag_matches(tag, kind)]
            if not candidates:
                return value, [type_issue(" | ".join(self.tags), value, path)]

        option_issues: List[List[SchemaIssue]] = []
        for option in candidates:
            output, issues = option._check(value, path)
            if not issues:
                return output, []
            option_issues.append(issues)

        if len(option_issues) == 1:
            return value, option_issues[0]
        if value is MISSING:
            return value, [required_issue(path)]
        return value, [
            SchemaIssue(message="Value does not match any allowed schema", path=path, code="invalid_union")
        ]


def _merge(left: Any, right: Any) -> Any:
    if left is MISSING:
        return right
    if isinstance(left, dict) and isinstance(right, dict):
        merged = dict(left)
        merged.update(right)
        return merged
    return left


@dataclass(frozen=True)
class IntersectionValidator(Validator):
    left: Validator
    right: Validator

    def _check(self, value: Any, path: JsonPointer) -> CheckResult:
        left_output, left_issues = self.left._check(value, path)
        right_output, right_issues = self.right._check(value, path)
        issues = left_issues + right_issues
        if issues:
            return value, issues
        return _merge(left_output, right_output), []


def union(*options: Validator, tags: Tuple[str, ...] = ()) -> Validator:
    """Build a union; a single option is returned unwrapped."""
    if not options:
        return NeverValidator()
    if len(options) == 1:
        return options[0]
    return UnionValidator(tuple(options), tuple(tags))


def intersection(left: Validator, right: Validator) -> IntersectionValidator:
    return IntersectionValidator(left, right)

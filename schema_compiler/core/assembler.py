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

"""Turns a finished admissibility state into one base validator."""

from typing import Any, List, Mapping

from ..validators import AnyValidator, NeverValidator, Validator, union
from .types import SPECIALIZED_KINDS, AdmissibilityState, default_validator

# Keys that never constrain a value.
ANNOTATION_KEYWORDS = frozenset({"$schema", "title", "description"})


def has_constraints(schema: Mapping[str, Any]) -> bool:
    return any(key not in ANNOTATION_KEYWORDS for key in schema)


def build_base_validator(types: AdmissibilityState, schema: Mapping[str, Any]) -> Validator:
    """Assemble the composite validator.

    No admitted kind gives a never validator, a single kind is used as is, and
    several kinds become a union tagged by kind, except for an unconstrained
    schema, which accepts anything.
    """
    options: List[Validator] = []
    tags: List[str] = []

    for kind, slot in types.admitted():
        validator = slot if isinstance(slot, Validator) else None
        if validator is None:
            if kind in SPECIALIZED_KINDS:
                continue
            validator = default_validator(kind)
        options.append(validator)
        tags.append(kind.value)

    if not options:
        return NeverValidator()
    if len(options) == 1:
        return options[0]
    if not has_constraints(schema):
        return AnyValidator()
    return union(*options, tags=tuple(tags))

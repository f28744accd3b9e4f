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

"""``const`` and ``enum``: narrow the admitted kinds to those of the literals."""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ...core.types import AdmissibilityState, Convert, Kind, PrimitiveHandler, kind_of
from ...validators import EnumValidator, LiteralValidator, NullValidator, Validator, intersection

logger = logging.getLogger(__name__)

SCALAR_KINDS = (Kind.STRING, Kind.NUMBER, Kind.BOOLEAN, Kind.NULL)
COMPOSITE_KINDS = (Kind.ARRAY, Kind.OBJECT)


def _literal_validator(kind: Kind, members: List[Any]) -> Validator:
    if kind is Kind.NULL:
        return NullValidator()
    if len(members) == 1:
        return LiteralValidator(members[0])
    return EnumValidator(tuple(members))


def _admitted_with(kind: Optional[Kind]) -> tuple:
    # A list literal may still be matched by a positional tuple.
    if kind is Kind.ARRAY:
        return (Kind.ARRAY, Kind.TUPLE)
    return (kind,) if kind is not None else ()


class ConstHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        if "const" not in schema:
            return

        value = schema["const"]
        kind = kind_of(value)
        types.disable_all_except(*_admitted_with(kind))
        if kind is None:
            logger.debug(f"const value {value!r} is not a JSON value; nothing can match it")
            return

        if kind in COMPOSITE_KINDS:
            types.mark_pending(kind)
        else:
            types.set(kind, _literal_validator(kind, [value]))


class EnumHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        values = schema.get("enum")
        if not isinstance(values, list):
            return

        if not values:
            # An empty enum under an explicit type is ignored.
            if "type" not in schema:
                types.disable_all_except()
            return

        grouped: Dict[Optional[Kind], List[Any]] = {}
        for value in values:
            grouped.setdefault(kind_of(value), []).append(value)

        for kind in SCALAR_KINDS:
            members = grouped.get(kind)
            if not members:
                types.disable(kind)
                continue
            literal = _literal_validator(kind, members)
            existing = types.validator(kind)
            types.set(kind, literal if existing is None else intersection(existing, literal))

        for kind in COMPOSITE_KINDS:
            if grouped.get(kind):
                types.mark_pending(kind)
            else:
                types.disable(kind)

        if not grouped.get(Kind.ARRAY):
            types.disable(Kind.TUPLE)
        types.disable(Kind.FILE)

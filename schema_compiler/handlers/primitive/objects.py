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

"""Object keywords: declared properties, required keys and key counts."""

from typing import Any, Dict, Mapping, Optional, Union

from ...core.types import AdmissibilityState, Convert, Kind, PrimitiveHandler
from ...validators import (
    AdditionalKeys,
    AnyValidator,
    FieldSpec,
    ObjectValidator,
    Validator,
    intersection,
)

OBJECT_KEYWORDS = (
    "properties",
    "required",
    "additionalProperties",
    "minProperties",
    "maxProperties",
    "patternProperties",
)


class ImplicitObjectHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        if "type" in schema or not any(key in schema for key in OBJECT_KEYWORDS):
            return
        if types.is_open(Kind.OBJECT):
            types.set(Kind.OBJECT, ObjectValidator(fields={}, additional=AdditionalKeys.PASSTHROUGH))


def additional_policy(schema: Mapping[str, Any], convert: Convert) -> Union[AdditionalKeys, Validator]:
    """Policy for undeclared keys.

    With ``patternProperties`` present every key passes here and the pattern
    refinement applies ``additionalProperties`` to keys no pattern matches.
    """
    if "patternProperties" in schema:
        return AdditionalKeys.PASSTHROUGH
    additional = schema.get("additionalProperties")
    if additional is False:
        return AdditionalKeys.STRICT
    if isinstance(additional, Mapping):
        return convert(additional)
    return AdditionalKeys.PASSTHROUGH


class PropertiesHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        if types.is_disabled(Kind.OBJECT):
            return
        if not any(key in schema for key in ("properties", "required", "additionalProperties")):
            return

        properties = schema.get("properties")
        required = schema.get("required")
        required_names = [name for name in required if isinstance(name, str)] if isinstance(required, list) else []

        fields: Dict[str, FieldSpec] = {}
        if isinstance(properties, Mapping):
            for name, sub_schema in properties.items():
                fields[name] = FieldSpec(convert(sub_schema), required=name in required_names)
        for name in required_names:
            if name not in fields:
                fields[name] = FieldSpec(AnyValidator(), required=True)

        built = ObjectValidator(fields=fields, additional=additional_policy(schema, convert))
        types.update(Kind.OBJECT, lambda current: _merge_object(current, built))


def _merge_object(current: Validator, built: ObjectValidator) -> Validator:
    if isinstance(current, ObjectValidator) and not current.fields:
        return built
    return intersection(current, built)


def _with_bounds(
    validator: Validator, min_properties: Optional[int] = None, max_properties: Optional[int] = None
) -> Validator:
    if isinstance(validator, ObjectValidator):
        return validator.with_bounds(min_properties=min_properties, max_properties=max_properties)
    if min_properties is not None:
        return validator.refine(
            lambda o: len(o) >= min_properties, f"Object must have at least {min_properties} properties"
        )
    return validator.refine(lambda o: len(o) <= max_properties, f"Object must have at most {max_properties} properties")


class MaxPropertiesHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        limit = schema.get("maxProperties")
        if limit is None:
            return
        types.update(Kind.OBJECT, lambda v: _with_bounds(v, max_properties=limit))


class MinPropertiesHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        limit = schema.get("minProperties")
        if limit is None:
            return
        types.update(Kind.OBJECT, lambda v: _with_bounds(v, min_properties=limit))

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

"""Entry point of the compiler.

A schema node is compiled in two phases. The primitive handlers decide which
value kinds are admitted and build a validator per kind; the assembler joins
them into one base validator; the refinement handlers then wrap that
validator with the keywords that span kinds or sub-schemas. Sub-schemas are
compiled by the handlers calling back into :func:`convert_json_schema`.
"""

from typing import Any, Dict, Mapping

from ..exceptions import InvalidSchemaError
from ..handlers.primitive import PRIMITIVE_HANDLERS
from ..handlers.refinement import REFINEMENT_HANDLERS
from ..validators import AnyValidator, NeverValidator, Validator
from .assembler import build_base_validator
from .types import AdmissibilityState, SchemaNode


def convert_json_schema(schema: SchemaNode) -> Validator:
    """Compile a JSON Schema node into a validator.

    Args:
        schema: ``True``, ``False`` or a mapping of schema keywords. Unknown
            keywords are ignored.

    Returns:
        A validator accepting exactly the values the schema admits.

    Raises:
        InvalidSchemaError: If ``schema`` is neither a boolean nor a mapping.
        SchemaConstructionError: If a ``pattern`` is not a valid regular
            expression.
    """
    if isinstance(schema, bool):
        return AnyValidator() if schema else NeverValidator()
    if not isinstance(schema, Mapping):
        raise InvalidSchemaError(f"Schema must be a boolean or a mapping, got {type(schema).__name__}")

    types = AdmissibilityState()
    for primitive in PRIMITIVE_HANDLERS:
        primitive.apply(types, schema, convert_json_schema)

    validator = build_base_validator(types, schema)
    for refinement in REFINEMENT_HANDLERS:
        validator = refinement.apply(validator, schema, convert_json_schema)
    return validator


def json_schema_object_to_shape(schema: Mapping[str, Any]) -> Dict[str, Validator]:
    """Compile each entry of ``properties`` on its own.

    ``required`` is not applied; every returned validator is the plain
    compilation of its property schema.
    """
    properties = schema.get("properties") or {}
    shape: Dict[str, Validator] = {}
    for name, sub_schema in properties.items():
        if sub_schema is None:
            continue
        shape[name] = convert_json_schema(sub_schema)
    return shape

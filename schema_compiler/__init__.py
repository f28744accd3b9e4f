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

"""Compile JSON Schema documents into runtime validators.

    >>> from schema_compiler import convert_json_schema
    >>> validator = convert_json_schema({"type": "integer", "minimum": 1})
    >>> validator.is_valid(3), validator.is_valid(0)
    (True, False)
"""

from .core.converter import convert_json_schema, json_schema_object_to_shape
from .exceptions import (
    InvalidSchemaError,
    SchemaCompilerError,
    SchemaConstructionError,
    SchemaLoadError,
    SchemaValidationError,
)
from .loader import load_schema
from .validators import MISSING, SchemaIssue, ValidationResult, Validator

__version__ = "0.1.0"

__all__ = [
    "convert_json_schema",
    "json_schema_object_to_shape",
    "load_schema",
    "Validator",
    "ValidationResult",
    "SchemaIssue",
    "MISSING",
    "SchemaCompilerError",
    "SchemaConstructionError",
    "SchemaValidationError",
    "InvalidSchemaError",
    "SchemaLoadError",
]

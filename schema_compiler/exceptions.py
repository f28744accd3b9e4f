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

"""Custom exceptions for the schema compiler."""


class SchemaCompilerError(Exception):
    """Base exception for schema-compiler related errors."""
    pass


class SchemaConstructionError(SchemaCompilerError):
    """Exception raised when a schema cannot be compiled (e.g. a malformed pattern)."""
    pass


class InvalidSchemaError(SchemaCompilerError):
    """Exception raised when a schema document is structurally invalid."""
    pass


class SchemaLoadError(SchemaCompilerError):
    """Exception raised when a schema or document file cannot be read or parsed."""
    pass


class SchemaValidationError(SchemaCompilerError):
    """Exception raised by ``Validator.parse`` when a value is rejected."""

    def __init__(self, issues):
        self.issues = tuple(issues)
        details = "\n".join(f"  - {issue}" for issue in self.issues)
        super().__init__(f"Validation failed:\n{details}" if details else "Validation failed")

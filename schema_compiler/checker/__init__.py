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

"""Checks JSON and YAML documents against a JSON Schema."""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..core.converter import convert_json_schema
from ..exceptions import SchemaLoadError
from ..loader import DocumentLoader, load_schema
from ..utils.source_location import lookup_source
from ..validators import Validator
from .report import CheckResult

__all__ = ['check_documents', 'check_document', 'CheckResult']

logger = logging.getLogger(__name__)


def check_document(validator: Validator, file_path: Path, loader: DocumentLoader) -> CheckResult:
    """Validate one document with an already compiled schema."""
    result = CheckResult(file_path)

    try:
        data, source_map = loader.load_with_source(file_path)
    except SchemaLoadError as e:
        result.add_error(str(e))
        return result

    if data is None and not source_map:
        result.add_warning("Document is empty; it is checked as null")

    outcome = validator.validate(data)
    for issue in outcome.issues:
        loc = lookup_source(source_map, issue.path, file_path)
        result.add_error(issue.message, line=loc.line, column=loc.column, pointer=issue.path)

    logger.debug(f"Checked {file_path}: {len(result.errors)} error(s)")
    return result


def check_documents(
    schema_path: Union[str, Path],
    document_paths: Sequence[Union[str, Path]],
    check_schema: Optional[bool] = None,
) -> List[CheckResult]:
    """Compile the schema once and validate every document against it.

    Args:
        schema_path: JSON or YAML schema file
        document_paths: Documents to check
        check_schema: Validate the schema against its metaschema first. If
            None, uses the global config.

    Returns:
        List of CheckResult objects, one per document

    Raises:
        SchemaCompilerError: If the schema cannot be loaded or compiled
    """
    schema = load_schema(schema_path, check=check_schema)
    validator = convert_json_schema(schema)

    loader = DocumentLoader()
    return [check_document(validator, Path(path), loader) for path in document_paths]

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

"""Loading of JSON Schema documents and of the documents checked against them.

``.json`` files are parsed with the ``json`` module and everything else with
PyYAML. PyYAML follows YAML 1.1, which reads ``1e3`` as a string. Source maps
come from PyYAML's node tree for both formats.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for

from .config import compiler_config
from .exceptions import InvalidSchemaError, SchemaLoadError
from .utils.source_location import SourceMap
from .validators.issues import join_path

logger = logging.getLogger(__name__)

# Schema cache keyed by resolved path
_SCHEMA_CACHE: Dict[Path, Any] = {}


def _read_document(path: Path) -> Tuple[str, Any]:
    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}")
    if not path.is_file():
        raise SchemaLoadError(f"Path is not a file: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaLoadError(f"Failed to read file {path}: {exc}") from exc

    if path.suffix.lower() == ".json":
        try:
            return content, json.loads(content)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(f"Invalid JSON in file {path}: {exc.msg} (line {exc.lineno})") from exc

    try:
        return content, yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise SchemaLoadError(f"Failed to parse file {path}: {exc}") from exc


def check_schema(schema: Any) -> None:
    """Check ``schema`` against the metaschema of the draft it declares.

    Raises:
        InvalidSchemaError: If the schema is not a valid JSON Schema.
    """
    if isinstance(schema, bool):
        return
    if not isinstance(schema, dict):
        raise InvalidSchemaError(f"Schema must be a boolean or a mapping, got {type(schema).__name__}")

    try:
        validator_for(schema).check_schema(schema)
    except SchemaError as exc:
        location = "/".join(str(part) for part in exc.absolute_path)
        raise InvalidSchemaError(f"Invalid schema at '/{location}': {exc.message}") from exc


def load_schema(file_path: Union[str, Path], check: Optional[bool] = None) -> Any:
    """Load a JSON Schema from a JSON or YAML file.

    Args:
        file_path: Path to the schema file
        check: Validate the schema against its metaschema. If None, uses the
            global config.

    Returns:
        The schema (a mapping or a boolean). Cached schemas are returned as
        copies so callers may modify them.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed
        InvalidSchemaError: If the document is not a schema
    """
    path = Path(file_path).resolve()
    if check is None:
        check = compiler_config.check_schema

    if compiler_config.cache_enabled and path in _SCHEMA_CACHE:
        logger.debug(f"Loading schema from cache: {path}")
        schema = copy.deepcopy(_SCHEMA_CACHE[path])
    else:
        logger.debug(f"Loading schema file: {path}")
        _, schema = _read_document(path)
        if not isinstance(schema, (dict, bool)):
            raise InvalidSchemaError(f"Schema file {path} must hold a mapping or a boolean")
        if compiler_config.cache_enabled:
            _SCHEMA_CACHE[path] = copy.deepcopy(schema)

    if check:
        check_schema(schema)
    return schema


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()
    logger.debug("Schema cache cleared")


class DocumentLoader:
    """Loads documents to validate, together with their source maps."""

    def __init__(self, cache_enabled: Optional[bool] = None):
        self.cache_enabled = cache_enabled if cache_enabled is not None else compiler_config.cache_enabled
        self._cache: Dict[Path, Tuple[Any, SourceMap]] = {}

    @staticmethod
    def build_source_map(content: str) -> SourceMap:
        """Build a mapping from JSON pointers to 1-based line/column.

        This uses PyYAML's node tree (yaml.compose) so locations are tracked
        independently of how the data itself was parsed.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            # Parse errors are reported when the data is read.
            return source_map

        if root is None:
            return source_map

        def _walk(node: yaml.Node, pointer: str) -> None:
            # PyYAML uses 0-based line/column
            mark = node.start_mark
            source_map[pointer] = {"line": mark.line + 1, "column": mark.column + 1}

            if isinstance(node, yaml.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, join_path(pointer, str(key)))
            elif isinstance(node, yaml.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, join_path(pointer, idx))

        _walk(root, "")
        return source_map

    def load_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load a JSON or YAML document and return (data, source_map).

        An empty YAML document loads as None; an empty JSON file is a parse error.
        """
        path = Path(file_path).resolve()

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading document from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading document: {path}")
        content, data = _read_document(path)
        source_map = self.build_source_map(content)

        if self.cache_enabled:
            self._cache[path] = (data, source_map)
        return data, source_map

    def clear_cache(self) -> None:
        self._cache.clear()

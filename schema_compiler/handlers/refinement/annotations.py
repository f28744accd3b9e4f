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

import logging
from typing import Any, Mapping

from ...core.types import Convert, RefinementHandler
from ...validators import Validator

logger = logging.getLogger(__name__)


class DefaultHandler(RefinementHandler):
    """Attach ``default`` when it satisfies the schema it belongs to."""

    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        if "default" not in schema:
            return validator
        default = schema["default"]
        if not validator.is_valid(default):
            logger.debug(f"Dropping default {default!r}: it does not satisfy its own schema")
            return validator
        return validator.default(default)


class MetadataHandler(RefinementHandler):
    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        description = schema.get("description")
        if not isinstance(description, str):
            return validator
        return validator.describe(description)

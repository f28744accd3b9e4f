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

from typing import Any, Mapping

from ...core.types import AdmissibilityState, Convert, Kind, PrimitiveHandler
from ...core.utils import compile_pattern, grapheme_length
from ...validators import StringValidator

STRING_KEYWORDS = ("minLength", "maxLength", "pattern")


class ImplicitStringHandler(PrimitiveHandler):
    """String keywords without ``type`` admit strings."""

    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        if "type" in schema or not any(key in schema for key in STRING_KEYWORDS):
            return
        if types.is_open(Kind.STRING):
            types.set(Kind.STRING, StringValidator())


class MinLengthHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        if "minLength" not in schema:
            return
        limit = schema["minLength"]
        types.update(
            Kind.STRING,
            lambda v: v.refine(
                lambda s: grapheme_length(s) >= limit, f"String must contain at least {limit} character(s)"
            ),
        )


class MaxLengthHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        if "maxLength" not in schema:
            return
        limit = schema["maxLength"]
        types.update(
            Kind.STRING,
            lambda v: v.refine(
                lambda s: grapheme_length(s) <= limit, f"String must contain at most {limit} character(s)"
            ),
        )


class PatternHandler(PrimitiveHandler):
    """``pattern`` is a search, not an anchored match.

    The pattern is only compiled while strings are admitted, so a bad pattern
    under a non-string type is ignored.
    """

    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        if "pattern" not in schema or types.is_disabled(Kind.STRING):
            return
        pattern = schema["pattern"]
        compiled = compile_pattern(pattern)
        types.update(
            Kind.STRING,
            lambda v: v.refine(lambda s: compiled.search(s) is not None, f"String must match pattern {pattern!r}"),
        )

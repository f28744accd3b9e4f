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

"""``type`` and the binary file form of ``type: string``."""

from typing import Any, Mapping, Set, Tuple

from ...core.types import AdmissibilityState, Convert, Kind, PrimitiveHandler
from ...core.utils import is_integral
from ...validators import FileValidator

# JSON Schema type name -> kinds it keeps enabled.
TYPE_KINDS = {
    "string": (Kind.STRING, Kind.FILE),
    "number": (Kind.NUMBER,),
    "integer": (Kind.NUMBER,),
    "boolean": (Kind.BOOLEAN,),
    "null": (Kind.NULL,),
    "array": (Kind.ARRAY, Kind.TUPLE),
    "object": (Kind.OBJECT,),
}


def declared_types(schema: Mapping[str, Any]) -> Set[str]:
    raw = schema.get("type")
    if isinstance(raw, list):
        return {name for name in raw if isinstance(name, str)}
    if isinstance(raw, str):
        return {raw}
    return set()


class TypeHandler(PrimitiveHandler):
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        if "type" not in schema:
            return

        names = declared_types(schema)
        kept = {kind for name in names for kind in TYPE_KINDS.get(name, ())}
        for kind in Kind:
            if kind not in kept:
                types.disable(kind)

        if "integer" in names and "number" not in names:
            types.update(Kind.NUMBER, lambda v: v.refine(is_integral, "Expected integer, received float"))


def _media_types(raw: Any) -> Tuple[str, ...]:
    if isinstance(raw, str):
        return (raw,)
    if isinstance(raw, list):
        return tuple(item for item in raw if isinstance(item, str))
    return ()


class FileHandler(PrimitiveHandler):
    """``type: string`` with binary format and encoding describes an upload."""

    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        if not (
            schema.get("type") == "string"
            and schema.get("format") == "binary"
            and schema.get("contentEncoding") == "binary"
        ):
            return

        types.set(
            Kind.FILE,
            FileValidator(
                min_size=schema.get("minLength"),
                max_size=schema.get("maxLength"),
                media_types=_media_types(schema.get("contentMediaType")),
            ),
        )
        types.disable(Kind.STRING)

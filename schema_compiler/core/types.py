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

"""Core types of the two-phase compiler.

The primitive phase records, per value kind, whether the kind is admitted and
which validator applies to it. That record is the :class:`AdmissibilityState`;
one instance is created for every schema node and dropped once the base
validator has been assembled.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from ..validators import (
    AdditionalKeys,
    ArrayValidator,
    BooleanValidator,
    NullValidator,
    NumberValidator,
    ObjectValidator,
    StringValidator,
    Validator,
    json_kind,
)


SchemaNode = Union[bool, Mapping[str, Any]]
Convert = Callable[[SchemaNode], Validator]


class Kind(Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    TUPLE = "tuple"
    OBJECT = "object"
    FILE = "file"


# Kinds a JSON value can belong to, in assembly order. TUPLE and FILE are
# specialisations that only exist once a handler builds them.
ASSEMBLY_ORDER: Tuple[Kind, ...] = (
    Kind.STRING,
    Kind.NUMBER,
    Kind.BOOLEAN,
    Kind.NULL,
    Kind.ARRAY,
    Kind.TUPLE,
    Kind.OBJECT,
    Kind.FILE,
)
SPECIALIZED_KINDS = frozenset({Kind.TUPLE, Kind.FILE})


def kind_of(value: Any) -> Optional[Kind]:
    """Kind of a literal schema value (``const``/``enum`` member)."""
    name = json_kind(value)
    if name is None or name == "file":
        return None
    return Kind(name)


class SlotState(Enum):
    UNSET = "unset"
    DISABLED = "disabled"
    # Enabled, but the real check is a deep-equality refinement added later.
    PENDING = "pending"


Slot = Union[SlotState, Validator]


def default_validator(kind: Kind) -> Optional[Validator]:
    """Base validator used for an admitted kind that no handler specialised."""
    if kind is Kind.STRING:
        return StringValidator()
    if kind is Kind.NUMBER:
        return NumberValidator()
    if kind is Kind.BOOLEAN:
        return BooleanValidator()
    if kind is Kind.NULL:
        return NullValidator()
    if kind is Kind.ARRAY:
        return ArrayValidator()
    if kind is Kind.OBJECT:
        return ObjectValidator(fields={}, additional=AdditionalKeys.PASSTHROUGH)
    return None


class AdmissibilityState:
    """Per-kind admissibility record for one schema node.

    ``DISABLED`` is a latch: once a kind is disabled, ``set``, ``update`` and
    ``mark_pending`` leave it disabled.
    """

    def __init__(self) -> None:
        self._slots: Dict[Kind, Slot] = {kind: SlotState.UNSET for kind in Kind}

    def get(self, kind: Kind) -> Slot:
        return self._slots[kind]

    def is_disabled(self, kind: Kind) -> bool:
        return self._slots[kind] is SlotState.DISABLED

    def is_open(self, kind: Kind) -> bool:
        """True while the kind is enabled but has no concrete validator."""
        return self._slots[kind] in (SlotState.UNSET, SlotState.PENDING)

    def validator(self, kind: Kind) -> Optional[Validator]:
        slot = self._slots[kind]
        return slot if isinstance(slot, Validator) else None

    def disable(self, kind: Kind) -> None:
        self._slots[kind] = SlotState.DISABLED

    def disable_all_except(self, *kinds: Kind) -> None:
        for kind in Kind:
            if kind not in kinds:
                self.disable(kind)

    def mark_pending(self, kind: Kind) -> None:
        if self._slots[kind] is SlotState.UNSET:
            self._slots[kind] = SlotState.PENDING

    def set(self, kind: Kind, validator: Validator) -> None:
        if not self.is_disabled(kind):
            self._slots[kind] = validator

    def update(self, kind: Kind, build: Callable[[Validator], Validator]) -> None:
        """Replace the kind's validator with ``build(current)``.

        ``current`` is the kind's default base validator while the slot is
        still open. Disabled kinds are left untouched.
        """
        if self.is_disabled(kind):
            return
        current = self.validator(kind) or default_validator(kind)
        if current is None:
            return
        self._slots[kind] = build(current)

    def admitted(self) -> List[Tuple[Kind, Slot]]:
        return [(kind, self._slots[kind]) for kind in ASSEMBLY_ORDER if not self.is_disabled(kind)]


class PrimitiveHandler(ABC):
    """Reads keywords of a schema node and updates the admissibility state."""

    @abstractmethod
    def apply(self, types: AdmissibilityState, schema: Mapping[str, Any], convert: Convert) -> None:
        pass


class RefinementHandler(ABC):
    """Wraps the assembled validator with cross-kind or combinator logic."""

    @abstractmethod
    def apply(self, validator: Validator, schema: Mapping[str, Any], convert: Convert) -> Validator:
        pass

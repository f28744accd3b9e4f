"""Primitive handlers, in the order the converter runs them."""

from typing import Tuple

from ...core.types import PrimitiveHandler
from .arrays import ImplicitArrayHandler, ItemsHandler, MaxItemsHandler, MinItemsHandler, TupleHandler
from .kinds import FileHandler, TypeHandler
from .literals import ConstHandler, EnumHandler
from .numbers import (
    ExclusiveMaximumHandler,
    ExclusiveMinimumHandler,
    MaximumHandler,
    MinimumHandler,
    MultipleOfHandler,
)
from .objects import ImplicitObjectHandler, MaxPropertiesHandler, MinPropertiesHandler, PropertiesHandler
from .strings import ImplicitStringHandler, MaxLengthHandler, MinLengthHandler, PatternHandler

# Order matters: literals narrow the kinds first, type disables the rest, and
# the tuple handler must run before the array handlers read the array kind.
PRIMITIVE_HANDLERS: Tuple[PrimitiveHandler, ...] = (
    ConstHandler(),
    EnumHandler(),
    TypeHandler(),
    FileHandler(),
    ImplicitStringHandler(),
    ImplicitArrayHandler(),
    ImplicitObjectHandler(),
    MinLengthHandler(),
    MaxLengthHandler(),
    PatternHandler(),
    MinimumHandler(),
    MaximumHandler(),
    ExclusiveMinimumHandler(),
    ExclusiveMaximumHandler(),
    MultipleOfHandler(),
    TupleHandler(),
    MinItemsHandler(),
    MaxItemsHandler(),
    ItemsHandler(),
    PropertiesHandler(),
    MaxPropertiesHandler(),
    MinPropertiesHandler(),
)

__all__ = [
    "PRIMITIVE_HANDLERS",
    "ConstHandler",
    "EnumHandler",
    "TypeHandler",
    "FileHandler",
    "ImplicitStringHandler",
    "ImplicitArrayHandler",
    "ImplicitObjectHandler",
    "MinLengthHandler",
    "MaxLengthHandler",
    "PatternHandler",
    "MinimumHandler",
    "MaximumHandler",
    "ExclusiveMinimumHandler",
    "ExclusiveMaximumHandler",
    "MultipleOfHandler",
    "TupleHandler",
    "MinItemsHandler",
    "MaxItemsHandler",
    "ItemsHandler",
    "PropertiesHandler",
    "MaxPropertiesHandler",
    "MinPropertiesHandler",
]

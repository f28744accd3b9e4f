"""Refinement handlers, in the order the converter applies them."""

from typing import Tuple

from ...core.types import RefinementHandler
from .annotations import DefaultHandler, MetadataHandler
from .arrays import ContainsHandler, PrefixItemsHandler, UniqueItemsHandler
from .combinators import AllOfHandler, AnyOfHandler, NotHandler, OneOfHandler
from .literals import ConstComplexHandler, EnumComplexHandler
from .objects import PatternPropertiesHandler, ProtoRequiredHandler

# The default is checked against the fully refined validator, and the
# description wraps everything.
REFINEMENT_HANDLERS: Tuple[RefinementHandler, ...] = (
    ProtoRequiredHandler(),
    EnumComplexHandler(),
    ConstComplexHandler(),
    AllOfHandler(),
    AnyOfHandler(),
    OneOfHandler(),
    PrefixItemsHandler(),
    ContainsHandler(),
    PatternPropertiesHandler(),
    UniqueItemsHandler(),
    NotHandler(),
    DefaultHandler(),
    MetadataHandler(),
)

__all__ = [
    "REFINEMENT_HANDLERS",
    "ProtoRequiredHandler",
    "EnumComplexHandler",
    "ConstComplexHandler",
    "AllOfHandler",
    "AnyOfHandler",
    "OneOfHandler",
    "PrefixItemsHandler",
    "ContainsHandler",
    "PatternPropertiesHandler",
    "UniqueItemsHandler",
    "NotHandler",
    "DefaultHandler",
    "MetadataHandler",
]

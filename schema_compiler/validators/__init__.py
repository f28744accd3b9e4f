"""Composable runtime validators.

This package has no knowledge of JSON Schema keywords; the compiler in
``schema_compiler.core`` targets it.
"""

from .issues import MISSING, SchemaIssue, ValidationResult, join_path
from .values import json_equal, json_kind
from .base import (
    AnyValidator,
    DefaultedValidator,
    DescribedValidator,
    EnumValidator,
    IntersectionValidator,
    LiteralValidator,
    NeverValidator,
    OptionalValidator,
    RefinedValidator,
    UnionValidator,
    Validator,
    intersection,
    union,
)
from .primitives import (
    BooleanValidator,
    FileValidator,
    NullValidator,
    NumberValidator,
    StringValidator,
)
from .structures import (
    AdditionalKeys,
    ArrayValidator,
    FieldSpec,
    ObjectValidator,
    TupleValidator,
)

__all__ = [
    "MISSING",
    "SchemaIssue",
    "ValidationResult",
    "join_path",
    "json_equal",
    "json_kind",
    "Validator",
    "AnyValidator",
    "NeverValidator",
    "LiteralValidator",
    "EnumValidator",
    "RefinedValidator",
    "OptionalValidator",
    "DefaultedValidator",
    "DescribedValidator",
    "UnionValidator",
    "IntersectionValidator",
    "union",
    "intersection",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "NullValidator",
    "FileValidator",
    "ArrayValidator",
    "TupleValidator",
    "ObjectValidator",
    "FieldSpec",
    "AdditionalKeys",
]

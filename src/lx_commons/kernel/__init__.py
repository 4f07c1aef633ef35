"""Kernel – dependency-free building blocks: errors and value types."""

from lx_commons.kernel.errors import (
    BaseError,
    EmptyValueError,
    IllegalArgumentError,
    IteratorExhaustedError,
    NullReferenceError,
    ToBeDefinedError,
    UnsupportedOperationError,
)
from lx_commons.kernel.types import NONE, Nothing, Option, Some

__all__ = [
    "NONE",
    "BaseError",
    "EmptyValueError",
    "IllegalArgumentError",
    "IteratorExhaustedError",
    "Nothing",
    "NullReferenceError",
    "Option",
    "Some",
    "ToBeDefinedError",
    "UnsupportedOperationError",
]

"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── EmptyValueError            (+ LookupError)
    ├── IllegalArgumentError       (+ ValueError)
    ├── NullReferenceError         (+ TypeError)
    ├── IteratorExhaustedError     (+ StopIteration)
    └── UnsupportedOperationError
        └── ToBeDefinedError       (+ NotImplementedError)
"""

from lx_commons.kernel.errors.base import BaseError
from lx_commons.kernel.errors.lang import (
    EmptyValueError,
    IllegalArgumentError,
    IteratorExhaustedError,
    NullReferenceError,
    ToBeDefinedError,
    UnsupportedOperationError,
)

__all__ = [
    "BaseError",
    "EmptyValueError",
    "IllegalArgumentError",
    "IteratorExhaustedError",
    "NullReferenceError",
    "ToBeDefinedError",
    "UnsupportedOperationError",
]

"""Language-level errors raised by options, iterators and sequences.

Each error also derives from the builtin exception Python code already
expects in the same situation, so ``except LookupError`` or a plain
``for`` loop keeps working.
"""

from __future__ import annotations

from typing import Any

from lx_commons.kernel.errors.base import BaseError


class EmptyValueError(BaseError, LookupError):
    """A value was requested from something that holds none."""

    default_code = "empty_value"
    default_message = "No value present"


class IllegalArgumentError(BaseError, ValueError):
    """An argument is outside the range the operation accepts."""

    default_code = "illegal_argument"
    default_message = "Illegal argument"

    def __init__(self, message: str | None = None, *, argument: str | None = None, value: Any = None, **kwargs: Any) -> None:
        if message is None and argument is not None:
            message = f"Illegal value for '{argument}': {value!r}"
        super().__init__(message, **kwargs)
        self.argument = argument
        self.value = value


class NullReferenceError(BaseError, TypeError):
    """``None`` was supplied where a real value is required."""

    default_code = "null_reference"
    default_message = "Unexpected None"


class IteratorExhaustedError(BaseError, StopIteration):
    """``next()`` was called on an iterator with no remaining element.

    Subclasses :class:`StopIteration` so that ``for`` loops and builtins
    such as ``list()`` terminate normally.
    """

    default_code = "iterator_exhausted"
    default_message = "Iterator exhausted"


class UnsupportedOperationError(BaseError):
    """The operation is well defined but not available for this source."""

    default_code = "unsupported_operation"
    default_message = "Operation not supported"


class ToBeDefinedError(UnsupportedOperationError, NotImplementedError):
    """The operation has no default implementation."""

    default_code = "to_be_defined"
    default_message = "To be defined"


__all__ = [
    "EmptyValueError",
    "IllegalArgumentError",
    "IteratorExhaustedError",
    "NullReferenceError",
    "ToBeDefinedError",
    "UnsupportedOperationError",
]

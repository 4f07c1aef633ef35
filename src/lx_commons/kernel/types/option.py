"""Option[T] monad – Some and Nothing variants.

``NONE`` is the single shared ``Nothing`` instance. Build options with the
factories rather than the constructors::

    Option.some(1)          # Some(1); raises NullReferenceError for None
    Option.of_nullable(x)   # NONE when x is None, Some(x) otherwise
    Option.none()           # NONE
"""

from __future__ import annotations

import abc
from typing import Any, Callable, Generic, Iterator, NoReturn, TypeVar

from lx_commons.kernel.errors import EmptyValueError, NullReferenceError

T = TypeVar("T")
R = TypeVar("R")


class Option(abc.ABC, Generic[T]):
    """Either holds exactly one value (:class:`Some`) or none (:data:`NONE`)."""

    __slots__ = ()

    # Variant queries ----------------------------------------------------
    @abc.abstractmethod
    def is_defined(self) -> bool: ...

    def not_defined(self) -> bool:
        return not self.is_defined()

    def is_some(self) -> bool:
        return self.is_defined()

    def is_none(self) -> bool:
        return not self.is_defined()

    def is_present(self) -> bool:
        return self.is_defined()

    # Access -------------------------------------------------------------
    @abc.abstractmethod
    def get(self) -> T:
        """Return the value, raising :class:`EmptyValueError` when empty."""

    def unwrap(self) -> T:
        return self.get()

    def or_else(self, fallback: T) -> T:
        return self.get() if self.is_defined() else fallback

    def unwrap_or(self, default: T) -> T:
        return self.or_else(default)

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return self.get() if self.is_defined() else supplier()

    # Combinators --------------------------------------------------------
    def map(self, func: Callable[[T], R]) -> "Option[R]":
        # A None result is still wrapped: map never flattens.
        if self.is_defined():
            return Some(func(self.get()))
        return NONE

    def flat_map(self, func: Callable[[T], "Option[R]"]) -> "Option[R]":
        if not self.is_defined():
            return NONE
        result = func(self.get())
        if result is None:
            raise NullReferenceError("flat_map function returned None instead of an Option")
        if not isinstance(result, Option):
            raise TypeError(f"flat_map function must return an Option, got {type(result).__name__}")
        return result

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        if self.is_defined() and predicate(self.get()):
            return self
        return NONE

    def run_with(self, consumer: Callable[[T], Any]) -> None:
        if self.is_defined():
            consumer(self.get())

    # Factories ----------------------------------------------------------
    @staticmethod
    def some(value: T) -> "Some[T]":
        if value is None:
            raise NullReferenceError("Some must hold a value")
        return Some(value)

    @staticmethod
    def of(value: T) -> "Some[T]":
        return Option.some(value)

    @staticmethod
    def any(value: T | None) -> "Option[T]":
        return NONE if value is None else Some(value)

    @staticmethod
    def of_nullable(value: T | None) -> "Option[T]":
        return Option.any(value)

    @staticmethod
    def none() -> "Option[Any]":
        return NONE

    @staticmethod
    def empty() -> "Option[Any]":
        return NONE


class Some(Option[T]):
    """Option with a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_defined(self) -> bool:
        return True

    def get(self) -> T:
        return self._value

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        return isinstance(other, Some) and self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Option[Any]):
    """Empty option. There is exactly one instance, :data:`NONE`."""

    __slots__ = ()

    _instance: "Nothing | None" = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_defined(self) -> bool:
        return False

    def get(self) -> NoReturn:
        raise EmptyValueError("Called get() on Nothing")

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return 0

    def __copy__(self) -> "Nothing":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Nothing":
        return self

    def __reduce__(self) -> str:
        return "NONE"

    def __repr__(self) -> str:
        return "Nothing"


NONE: Nothing = Nothing()


def some(value: T) -> Some[T]:
    return Option.some(value)


def of_nullable(value: T | None) -> Option[T]:
    return Option.of_nullable(value)


def none() -> Option[Any]:
    return NONE


__all__ = ["NONE", "Nothing", "Option", "Some", "none", "of_nullable", "some"]

"""Traversable – lazy functional view over an iterable source.

A ``Traversable`` never materialises its elements. ``map``, ``flat_map``
and ``filter`` return new views holding a reference to this one; work only
happens when something iterates the outermost view. Each iteration calls
``iterator()`` again, so a view over a list can be walked many times while
a view over a raw iterator is single-pass, exactly like its source.

Callbacks run lazily, when the element they apply to is reached, and any
exception they raise propagates unchanged to whoever is pulling. The one
exception is ``StopIteration`` (which includes
:class:`~lx_commons.kernel.errors.IteratorExhaustedError`): raised from a
callback it ends a ``for`` loop or ``to_list()`` early, exactly as it
would inside the builtin ``map``.
"""
from __future__ import annotations

import abc
from collections.abc import Sized
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, TypeVar, overload

from lx_commons.collection.iterators import BaseIterator
from lx_commons.kernel.errors import UnsupportedOperationError
from lx_commons.kernel.types import NONE, Option, Some

if TYPE_CHECKING:
    from lx_commons.collection.sequence.base import Sequence

T = TypeVar("T")
R = TypeVar("R")

_MISSING: Any = object()


def size_of(source: Iterable[Any]) -> Option[int]:
    """Return the element count of *source* when it can be known without iterating."""
    if isinstance(source, Traversable):
        return Some(source.size()) if source.sized() else NONE
    if isinstance(source, Sized):
        return Some(len(source))
    return NONE


class Traversable(abc.ABC, Generic[T]):
    """Abstract base: implement :meth:`iterator`, inherit everything else."""

    @abc.abstractmethod
    def iterator(self) -> BaseIterator[T]: ...

    def __iter__(self) -> BaseIterator[T]:
        return self.iterator()

    # Size ---------------------------------------------------------------
    def sized(self) -> bool:
        return False

    def size(self) -> int:
        raise UnsupportedOperationError(f"{type(self).__name__} is not sized")

    # Lazy transforms ----------------------------------------------------
    def map(self, mapper: Callable[[T], R]) -> "Traversable[R]":
        from lx_commons.collection.traversable.views import MappedTraversable

        return MappedTraversable(self, mapper)

    def flat_map(self, mapper: Callable[[T], Iterable[R]]) -> "Traversable[R]":
        from lx_commons.collection.traversable.views import FlatMappedTraversable

        return FlatMappedTraversable(self, mapper)

    def filter(self, predicate: Callable[[T], bool]) -> "Traversable[T]":
        from lx_commons.collection.traversable.views import FilteredTraversable

        return FilteredTraversable(self, predicate)

    # Strict operations --------------------------------------------------
    @overload
    def reduce(self, accumulator: Callable[[T, T], T]) -> Option[T]: ...

    @overload
    def reduce(self, accumulator: Callable[[R, T], R], initial: R) -> R: ...

    def reduce(self, accumulator: Callable[[Any, T], Any], initial: Any = _MISSING) -> Any:
        """Left fold.

        With *initial* the fold starts from it and the plain result is
        returned. Without it the first element seeds the fold and the result
        is wrapped in an :class:`Option` (``NONE`` when there are no
        elements).
        """
        if initial is not _MISSING:
            result = initial
            for item in self:
                result = accumulator(result, item)
            return result
        itr = self.iterator()
        if not itr.has_next():
            return NONE
        result = itr.next()
        while itr.has_next():
            result = accumulator(result, itr.next())
        return Some(result)

    def find_one(self, predicate: Callable[[T], bool]) -> Option[T]:
        for item in self:
            if predicate(item):
                return Some(item)
        return NONE

    def any_match(self, predicate: Callable[[T], bool]) -> bool:
        return self.find_one(predicate).is_defined()

    def none_match(self, predicate: Callable[[T], bool]) -> bool:
        return not self.any_match(predicate)

    def all_match(self, predicate: Callable[[T], bool]) -> bool:
        return self.none_match(lambda item: not predicate(item))

    def accept(self, visitor: Callable[[T], Any]) -> "Traversable[T]":
        """Call *visitor* on every element now and return ``self``."""
        for item in self:
            visitor(item)
        return self

    def each(self, visitor: Callable[[T], Any]) -> "Traversable[T]":
        return self.accept(visitor)

    def to_list(self) -> list[T]:
        return list(self)

    # Factories ----------------------------------------------------------
    @staticmethod
    def of(iterable: Iterable[T]) -> "Traversable[T]":
        from lx_commons.collection.traversable.views import DelegateTraversable

        return DelegateTraversable.of(iterable)

    @staticmethod
    def nil() -> "Sequence[Any]":
        from lx_commons.collection.sequence.views import NIL

        return NIL


__all__ = ["Traversable", "size_of"]

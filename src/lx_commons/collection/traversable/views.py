"""Traversable – lazy views built from the iterator adapters."""
from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from lx_commons.collection.iterators import (
    BaseIterator,
    FilteredIterator,
    FilterType,
    FlatMappedIterator,
    MappedIterator,
    pull_iterator,
)
from lx_commons.collection.traversable.base import Traversable, size_of
from lx_commons.kernel.errors import NullReferenceError, UnsupportedOperationError

T = TypeVar("T")
R = TypeVar("R")


def _require(value: object, what: str) -> None:
    if value is None:
        raise NullReferenceError(f"{what} must not be None")


class DelegateTraversable(Traversable[T]):
    """Wraps an arbitrary iterable; sized when the iterable is."""

    def __init__(self, source: Iterable[T]) -> None:
        _require(source, "source")
        self._source = source

    def iterator(self) -> BaseIterator[T]:
        return pull_iterator(self._source)

    def sized(self) -> bool:
        return size_of(self._source).is_defined()

    def size(self) -> int:
        count = size_of(self._source)
        if not count.is_defined():
            raise UnsupportedOperationError(f"{type(self._source).__name__} source is not sized")
        return count.get()

    @classmethod
    def of(cls, source: Iterable[T]) -> "Traversable[T]":
        if isinstance(source, DelegateTraversable):
            return source
        return cls(source)


class MappedTraversable(Traversable[R]):
    """``mapper`` applied to every element; as sized as its source."""

    def __init__(self, source: Iterable[T], mapper: Callable[[T], R]) -> None:
        _require(source, "source")
        _require(mapper, "mapper")
        self._source = source
        self._mapper = mapper

    def iterator(self) -> BaseIterator[R]:
        return MappedIterator(self._source, self._mapper)

    def sized(self) -> bool:
        return size_of(self._source).is_defined()

    def size(self) -> int:
        if not self.sized():
            return super().size()
        return size_of(self._source).get()


class FlatMappedTraversable(Traversable[R]):
    def __init__(self, source: Iterable[T], mapper: Callable[[T], Iterable[R]]) -> None:
        _require(source, "source")
        _require(mapper, "mapper")
        self._source = source
        self._mapper = mapper

    def iterator(self) -> BaseIterator[R]:
        return FlatMappedIterator(self._source, self._mapper)


class FilteredTraversable(Traversable[T]):
    def __init__(
        self,
        source: Iterable[T],
        predicate: Callable[[T], bool],
        filter_type: FilterType = FilterType.ALL,
    ) -> None:
        _require(source, "source")
        _require(predicate, "predicate")
        self._source = source
        self._predicate = predicate
        self._type = filter_type

    def iterator(self) -> BaseIterator[T]:
        return FilteredIterator(self._source, self._predicate, self._type)


__all__ = [
    "DelegateTraversable",
    "FilteredTraversable",
    "FlatMappedTraversable",
    "MappedTraversable",
]

"""Iterators – factory namespace for the lazy iterator adapters."""
from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from lx_commons.collection.iterators.base import BaseIterator, pull_iterator
from lx_commons.collection.iterators.composite import CompositeIterator
from lx_commons.collection.iterators.filtered import FilteredIterator, FilterType
from lx_commons.collection.iterators.flat_mapped import FlatMappedIterator
from lx_commons.collection.iterators.index_filtered import IndexFilteredIterator
from lx_commons.collection.iterators.mapped import MappedIterator
from lx_commons.collection.iterators.zipped import ZippedIterator

T = TypeVar("T")
R = TypeVar("R")


class Iterators:
    """Build iterator adapters without naming the concrete classes.

    Example::

        evens = Iterators.filter(range(10), lambda n: n % 2 == 0)
        words = Iterators.flat_map(["a b", "c"], str.split)
    """

    @staticmethod
    def of(source: Iterable[T]) -> BaseIterator[T]:
        return pull_iterator(source)

    @staticmethod
    def composite(head: Iterable[T], tail: Iterable[T]) -> BaseIterator[T]:
        return CompositeIterator(head, tail)

    @staticmethod
    def filter(
        source: Iterable[T],
        predicate: Callable[[T], bool],
        filter_type: FilterType = FilterType.ALL,
    ) -> BaseIterator[T]:
        return FilteredIterator(source, predicate, filter_type)

    @staticmethod
    def filter_index(source: Iterable[T], predicate: Callable[[int], bool]) -> BaseIterator[T]:
        return IndexFilteredIterator(source, predicate)

    @staticmethod
    def flat_map(source: Iterable[T], mapper: Callable[[T], Iterable[R]]) -> BaseIterator[R]:
        return FlatMappedIterator(source, mapper)

    @staticmethod
    def map(source: Iterable[T], mapper: Callable[[T], R]) -> BaseIterator[R]:
        return MappedIterator(source, mapper)

    @staticmethod
    def zip(a: Iterable[Any], b: Iterable[Any]) -> BaseIterator[tuple[Any, Any]]:
        return ZippedIterator(a, b)

    @staticmethod
    def zip_all(
        a: Iterable[Any],
        b: Iterable[Any],
        default_a: Any,
        default_b: Any,
    ) -> BaseIterator[tuple[Any, Any]]:
        return ZippedIterator(a, b, default_a, default_b)


__all__ = ["Iterators"]

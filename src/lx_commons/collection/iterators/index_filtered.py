"""Iterators – IndexFilteredIterator."""
from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from lx_commons.collection.iterators.base import StatefulIterator, pull_iterator
from lx_commons.kernel.types import NONE, Option, Some

T = TypeVar("T")


class IndexFilteredIterator(StatefulIterator[T]):
    """Keeps the elements whose 0-based source position passes *predicate*.

    The cursor counts consumed source elements, not emitted ones.
    """

    def __init__(self, source: Iterable[T], predicate: Callable[[int], bool]) -> None:
        super().__init__()
        self._source = pull_iterator(source)
        self._predicate = predicate
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def get_current(self) -> Option[T]:
        while self._source.has_next():
            index = self._cursor
            item = self._source.next()
            self._cursor += 1
            if self._predicate(index):
                return Some(item)
        return NONE


__all__ = ["IndexFilteredIterator"]

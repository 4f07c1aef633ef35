"""Iterators – FlatMappedIterator."""
from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from lx_commons.collection.iterators.base import BaseIterator, StatefulIterator, pull_iterator
from lx_commons.kernel.types import NONE, Option, Some

T = TypeVar("T")
R = TypeVar("R")


class FlatMappedIterator(StatefulIterator[R]):
    """Emits every element of ``mapper(t1)``, then of ``mapper(t2)``, ...

    Empty inner iterables contribute nothing. Each inner iterator is owned
    by this adapter and dropped once the source runs dry.
    """

    def __init__(self, source: Iterable[T], mapper: Callable[[T], Iterable[R]]) -> None:
        super().__init__()
        self._source = pull_iterator(source)
        self._mapper = mapper
        self._inner: BaseIterator[R] | None = None

    def get_current(self) -> Option[R]:
        while self._inner is None or not self._inner.has_next():
            if not self._source.has_next():
                self._inner = None
                return NONE
            self._inner = pull_iterator(self._mapper(self._source.next()))
        return Some(self._inner.next())


__all__ = ["FlatMappedIterator"]

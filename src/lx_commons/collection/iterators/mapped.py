"""Iterators – MappedIterator."""
from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from lx_commons.collection.iterators.base import BaseIterator, pull_iterator
from lx_commons.kernel.errors import NullReferenceError

T = TypeVar("T")
R = TypeVar("R")


class MappedIterator(BaseIterator[R]):
    """One-to-one transform; no look-ahead needed."""

    def __init__(self, source: Iterable[T], mapper: Callable[[T], R]) -> None:
        if mapper is None:
            raise NullReferenceError("MappedIterator requires a mapper")
        self._source = pull_iterator(source)
        self._mapper = mapper

    def has_next(self) -> bool:
        return self._source.has_next()

    def next(self) -> R:
        return self._mapper(self._source.next())

    def __repr__(self) -> str:
        return f"MappedIterator(mapper={self._mapper!r}, source={self._source!r})"


__all__ = ["MappedIterator"]

"""Sequence – Array, a sized sequence over a fixed snapshot of elements."""
from __future__ import annotations

from typing import Iterable, TypeVar

from lx_commons.collection.iterators import BaseIterator, pull_iterator
from lx_commons.collection.sequence.base import Sequence

T = TypeVar("T")


class Array(Sequence[T]):
    """Copies its elements into a tuple once; always sized and restartable.

    Example::

        Array.of(1, 2, 3).map(str).to_list()   # ["1", "2", "3"]
    """

    __slots__ = ("_data",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: tuple[T, ...] = tuple(items)

    @classmethod
    def of(cls, *items: T) -> "Array[T]":
        return cls(items)

    def iterator(self) -> BaseIterator[T]:
        return pull_iterator(self._data)

    def sized(self) -> bool:
        return True

    def size(self) -> int:
        return len(self._data)

    def length(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Array):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Array{self._data!r}"


__all__ = ["Array"]

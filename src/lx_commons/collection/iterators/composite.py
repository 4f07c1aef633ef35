"""Iterators – CompositeIterator (concatenation)."""
from __future__ import annotations

from typing import Iterable, TypeVar

from lx_commons.collection.iterators.base import StatefulIterator, pull_iterator
from lx_commons.kernel.errors import NullReferenceError
from lx_commons.kernel.types import NONE, Option, Some

T = TypeVar("T")


class CompositeIterator(StatefulIterator[T]):
    """All of *head*, then all of *tail*. Never returns to *head* once it ran dry."""

    def __init__(self, head: Iterable[T], tail: Iterable[T]) -> None:
        super().__init__()
        if head is None or tail is None:
            raise NullReferenceError("CompositeIterator requires both head and tail")
        self._head = pull_iterator(head)
        self._tail = pull_iterator(tail)
        self._head_iterated = False

    def get_current(self) -> Option[T]:
        if not self._head_iterated:
            if self._head.has_next():
                return Some(self._head.next())
            self._head_iterated = True
        if self._tail.has_next():
            return Some(self._tail.next())
        return NONE


__all__ = ["CompositeIterator"]

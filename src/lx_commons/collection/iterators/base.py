"""Iterators – pull protocol and the look-ahead StatefulIterator base.

Every adapter in this package speaks the same protocol: ``has_next()``
answers without consuming, ``next()`` consumes. Both also work as plain
Python iterators, so ``for`` loops and ``list()`` behave as expected.

Instances are single-owner: nothing here is synchronised, and calling
``has_next()``/``next()`` on one iterator from several threads at once is
undefined.
"""
from __future__ import annotations

import abc
import enum
import logging
from typing import Any, Iterable, Iterator, TypeVar

from lx_commons.kernel.errors import IteratorExhaustedError
from lx_commons.kernel.types import NONE, Option, Some

T = TypeVar("T")
logger = logging.getLogger(__name__)

_END: Any = object()


class BaseIterator(Iterator[T]):
    """Port: an iterator that can report whether another element exists."""

    @abc.abstractmethod
    def has_next(self) -> bool: ...

    @abc.abstractmethod
    def next(self) -> T:
        """Return the next element or raise :class:`IteratorExhaustedError`."""

    def __iter__(self) -> "BaseIterator[T]":
        return self

    def __next__(self) -> T:
        return self.next()


class CursorState(enum.Enum):
    NOT_FETCHED = "not_fetched"
    BUFFERED = "buffered"
    DONE = "done"


class StatefulIterator(BaseIterator[T]):
    """Caches one look-ahead element so ``has_next()`` never advances twice.

    Subclasses implement :meth:`get_current`: pull zero or more upstream
    elements until one passes the adapter's logic, or return ``NONE``.
    Once ``get_current`` reports ``NONE`` the iterator is done for good and
    ``get_current`` is not called again.
    """

    def __init__(self) -> None:
        self._state = CursorState.NOT_FETCHED
        self._current: Option[T] = NONE

    @abc.abstractmethod
    def get_current(self) -> Option[T]: ...

    @property
    def state(self) -> CursorState:
        return self._state

    def has_next(self) -> bool:
        if self._state is CursorState.BUFFERED:
            return True
        if self._state is CursorState.DONE:
            return False
        current = self.get_current()
        if current.is_defined():
            self._current = current
            self._state = CursorState.BUFFERED
            return True
        self._state = CursorState.DONE
        logger.debug("%s exhausted", type(self).__name__)
        return False

    def next(self) -> T:
        if not self.has_next():
            raise IteratorExhaustedError(f"{type(self).__name__} has no more elements")
        value = self._current.get()
        self._current = NONE
        self._state = CursorState.NOT_FETCHED
        return value


class DelegateIterator(StatefulIterator[T]):
    """Adapts a plain Python iterator to the ``has_next``/``next`` protocol."""

    def __init__(self, source: Iterator[T]) -> None:
        super().__init__()
        self._source = source

    def get_current(self) -> Option[T]:
        item = next(self._source, _END)
        if item is _END:
            return NONE
        return Some(item)


def pull_iterator(source: Iterable[T]) -> BaseIterator[T]:
    """Return a fresh :class:`BaseIterator` over *source*.

    Calls ``iter(source)``: a restartable iterable gives a new pass, a raw
    iterator is handed back (wrapped if needed) and stays single-pass.
    """
    itr = iter(source)
    if isinstance(itr, BaseIterator):
        return itr
    return DelegateIterator(itr)


__all__ = ["BaseIterator", "CursorState", "DelegateIterator", "StatefulIterator", "pull_iterator"]

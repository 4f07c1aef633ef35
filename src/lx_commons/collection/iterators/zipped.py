"""Iterators – ZippedIterator."""
from __future__ import annotations

from typing import Any, Generic, Iterable, TypeVar

from lx_commons.collection.iterators.base import BaseIterator, pull_iterator
from lx_commons.kernel.errors import IllegalArgumentError, IteratorExhaustedError
from lx_commons.kernel.types import NONE, Option, Some

A = TypeVar("A")
B = TypeVar("B")

_MISSING: Any = object()


class ZippedIterator(BaseIterator[tuple[A, B]], Generic[A, B]):
    """Pairs elements of two iterators.

    Without defaults the pairs stop at the shorter side. With defaults
    (given together) the pairs run to the longer side and the exhausted
    side is padded with its default.

    Example::

        list(ZippedIterator([1, 2, 3], ["a", "b"]))              # [(1, "a"), (2, "b")]
        list(ZippedIterator([1, 2, 3], ["a", "b"], 0, "z"))      # [..., (3, "z")]
    """

    def __init__(
        self,
        a: Iterable[A],
        b: Iterable[B],
        default_a: A = _MISSING,
        default_b: B = _MISSING,
    ) -> None:
        if (default_a is _MISSING) != (default_b is _MISSING):
            raise IllegalArgumentError("ZippedIterator defaults must be given together")
        self._a = pull_iterator(a)
        self._b = pull_iterator(b)
        self._default_a: Option[A] = NONE if default_a is _MISSING else Some(default_a)
        self._default_b: Option[B] = NONE if default_b is _MISSING else Some(default_b)

    @property
    def fills(self) -> bool:
        return self._default_a.is_defined()

    def has_next(self) -> bool:
        has_a, has_b = self._a.has_next(), self._b.has_next()
        if has_a and has_b:
            return True
        return self.fills and (has_a or has_b)

    def next(self) -> tuple[A, B]:
        has_a, has_b = self._a.has_next(), self._b.has_next()
        if has_a and has_b:
            return self._a.next(), self._b.next()
        if self.fills:
            if has_a:
                return self._a.next(), self._default_b.get()
            if has_b:
                return self._default_a.get(), self._b.next()
        raise IteratorExhaustedError("ZippedIterator has no more pairs")


__all__ = ["ZippedIterator"]

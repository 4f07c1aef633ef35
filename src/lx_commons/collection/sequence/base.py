"""Sequence – a Traversable whose iteration order is significant.

Adds the position-based operations (head/tail/take/drop and friends),
concatenation and zipping. Every operation that returns a Sequence returns
a lazy view, except where the result is known up front: ``self`` when the
operation is a no-op on a sized sequence, :data:`NIL` when it would be
empty.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar, overload

from lx_commons.collection.iterators import FilterType
from lx_commons.collection.traversable.base import Traversable
from lx_commons.config import get_settings
from lx_commons.kernel.errors import (
    EmptyValueError,
    IllegalArgumentError,
    ToBeDefinedError,
    UnsupportedOperationError,
)

T = TypeVar("T")
R = TypeVar("R")
U = TypeVar("U")

logger = logging.getLogger(__name__)


class Sequence(Traversable[T]):
    """Abstract ordered view: implement ``iterator()``, inherit the rest."""

    # Element access -----------------------------------------------------
    @overload
    def head(self) -> T: ...

    @overload
    def head(self, n: int) -> "Sequence[T]": ...

    def head(self, n: int | None = None) -> Any:
        """``head()`` returns the first element; ``head(n)`` the first *n* as a Sequence.

        On an unsized source the ``head(n)`` view still walks the whole
        source after the *n*-th element, so over an endless iterator it
        never finishes. Use ``itertools.islice`` there.
        """
        if n is None:
            itr = self.iterator()
            if not itr.has_next():
                raise EmptyValueError("head() called on an empty sequence")
            return itr.next()
        if n < 0:
            raise IllegalArgumentError(argument="n", value=n)
        if n == 0:
            return Sequence.nil()
        if self.sized() and n >= self.size():
            return self
        from lx_commons.collection.sequence.views import IndexFilteredSequence

        return IndexFilteredSequence(self, lambda index: index < n)

    def take(self, n: int) -> "Sequence[T]":
        return self.head(n)

    def tail(self, n: int) -> "Sequence[T]":
        """The last *n* elements.

        Unsized sequences cannot know where the tail starts without
        buffering. By default they fall back to the first *n* elements;
        with ``LX_STRICT_TAIL`` enabled they raise
        :class:`UnsupportedOperationError` instead.
        """
        if n < 0:
            return self.head(-n)
        if n == 0:
            return Sequence.nil()
        if self.sized():
            size = self.size()
            if n >= size:
                return self
            return self.drop(size - n)
        if get_settings().strict_tail:
            raise UnsupportedOperationError("tail(n) requires a sized sequence")
        logger.warning("tail(%d) on unsized %s yields its first %d elements", n, type(self).__name__, n)
        from lx_commons.collection.sequence.views import IndexFilteredSequence

        return IndexFilteredSequence(self, lambda index: index < n)

    def drop(self, n: int) -> "Sequence[T]":
        if n == 0:
            return self
        if n < 0:
            return self.drop_tail(-n)
        if self.sized() and self.size() <= n:
            return Sequence.nil()
        from lx_commons.collection.sequence.views import IndexFilteredSequence

        return IndexFilteredSequence(self, lambda index: index >= n)

    def drop_tail(self, n: int) -> "Sequence[T]":
        if n == 0:
            return self
        if n < 0:
            return self.drop(-n)
        if self.sized() and self.size() <= n:
            return Sequence.nil()
        logger.debug("drop_tail(%d) refused for %s", n, type(self).__name__)
        raise UnsupportedOperationError("drop_tail(n) requires a sized sequence no longer than n")

    def drop_while(self, predicate: Callable[[T], bool]) -> "Sequence[T]":
        """Skip elements until *predicate* first holds; keep that one and everything after."""
        from lx_commons.collection.sequence.views import FilteredSequence

        return FilteredSequence(self, predicate, FilterType.UNTIL)

    def take_while(self, predicate: Callable[[T], bool]) -> "Sequence[T]":
        """Keep elements while *predicate* holds; stop for good at the first failure."""
        from lx_commons.collection.sequence.views import FilteredSequence

        return FilteredSequence(self, predicate, FilterType.WHILE)

    # Concatenation ------------------------------------------------------
    def append(self, tail: Any) -> "Sequence[T]":
        """Concatenate a Sequence after this one.

        Appending a single element needs a buffer-backed sequence and is
        not defined here.
        """
        if isinstance(tail, Sequence):
            from lx_commons.collection.sequence.views import CompositeSequence

            return CompositeSequence(self, tail)
        raise ToBeDefinedError(f"{type(self).__name__}.append(element) is not defined")

    def prepend(self, head: Any) -> "Sequence[T]":
        if isinstance(head, Sequence):
            from lx_commons.collection.sequence.views import CompositeSequence

            return CompositeSequence(head, self)
        raise ToBeDefinedError(f"{type(self).__name__}.prepend(element) is not defined")

    # Zipping ------------------------------------------------------------
    def zip(self, other: Iterable[U]) -> "Sequence[tuple[T, U]]":
        """Pairs up to the shorter side."""
        from lx_commons.collection.sequence.views import ZippedSequence

        return ZippedSequence(self, other)

    def zip_all(self, other: Iterable[U], default_self: T, default_other: U) -> "Sequence[tuple[T, U]]":
        """Pairs up to the longer side, padding the shorter one with its default."""
        from lx_commons.collection.sequence.views import ZippedSequence

        return ZippedSequence(self, other, default_self, default_other)

    # Order-preserving transforms -----------------------------------------
    def map(self, mapper: Callable[[T], R]) -> "Sequence[R]":
        from lx_commons.collection.sequence.views import MappedSequence

        return MappedSequence(self, mapper)

    def flat_map(self, mapper: Callable[[T], Iterable[R]]) -> "Sequence[R]":
        from lx_commons.collection.sequence.views import FlatMappedSequence

        return FlatMappedSequence(self, mapper)

    def filter(self, predicate: Callable[[T], bool]) -> "Sequence[T]":
        from lx_commons.collection.sequence.views import FilteredSequence

        return FilteredSequence(self, predicate)

    def accept(self, visitor: Callable[[T], Any]) -> "Sequence[T]":
        for item in self:
            visitor(item)
        return self

    def each(self, visitor: Callable[[T], Any]) -> "Sequence[T]":
        return self.accept(visitor)

    # Factories ----------------------------------------------------------
    @staticmethod
    def of(iterable: Iterable[T]) -> "Sequence[T]":
        from lx_commons.collection.sequence.views import DelegateSequence

        return DelegateSequence.of(iterable)

    @staticmethod
    def nil() -> "Sequence[Any]":
        from lx_commons.collection.sequence.views import NIL

        return NIL


__all__ = ["Sequence"]

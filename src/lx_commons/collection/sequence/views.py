"""Sequence – lazy order-preserving views built from the iterator adapters."""
from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from lx_commons.collection.iterators import (
    BaseIterator,
    CompositeIterator,
    FilteredIterator,
    FilterType,
    FlatMappedIterator,
    IndexFilteredIterator,
    MappedIterator,
    ZippedIterator,
    pull_iterator,
)
from lx_commons.collection.sequence.base import Sequence
from lx_commons.collection.traversable.base import size_of
from lx_commons.kernel.errors import IllegalArgumentError, NullReferenceError

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")
B = TypeVar("B")

_MISSING: Any = object()


def _require(value: object, what: str) -> None:
    if value is None:
        raise NullReferenceError(f"{what} must not be None")


class _SizedFromSource:
    """Mixin: report the source's size when the source is countable."""

    _source: Iterable[Any]

    def sized(self) -> bool:
        return size_of(self._source).is_defined()

    def size(self) -> int:
        count = size_of(self._source)
        if not count.is_defined():
            return super().size()  # type: ignore[misc]
        return count.get()


class DelegateSequence(_SizedFromSource, Sequence[T]):
    """Treats any iterable as an ordered sequence."""

    def __init__(self, source: Iterable[T]) -> None:
        _require(source, "source")
        self._source = source

    def iterator(self) -> BaseIterator[T]:
        return pull_iterator(self._source)

    @classmethod
    def of(cls, source: Iterable[T]) -> "DelegateSequence[T]":
        if isinstance(source, DelegateSequence):
            return source
        return cls(source)


class MappedSequence(_SizedFromSource, Sequence[R]):
    def __init__(self, source: Iterable[T], mapper: Callable[[T], R]) -> None:
        _require(source, "source")
        _require(mapper, "mapper")
        self._source = source
        self._mapper = mapper

    def iterator(self) -> BaseIterator[R]:
        return MappedIterator(self._source, self._mapper)


class FlatMappedSequence(Sequence[R]):
    def __init__(self, source: Iterable[T], mapper: Callable[[T], Iterable[R]]) -> None:
        _require(source, "source")
        _require(mapper, "mapper")
        self._source = source
        self._mapper = mapper

    def iterator(self) -> BaseIterator[R]:
        return FlatMappedIterator(self._source, self._mapper)


class FilteredSequence(Sequence[T]):
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

    @property
    def filter_type(self) -> FilterType:
        return self._type

    def iterator(self) -> BaseIterator[T]:
        return FilteredIterator(self._source, self._predicate, self._type)


class IndexFilteredSequence(Sequence[T]):
    """Keeps elements whose 0-based position passes *predicate*."""

    def __init__(self, source: Iterable[T], predicate: Callable[[int], bool]) -> None:
        _require(source, "source")
        _require(predicate, "predicate")
        self._source = source
        self._predicate = predicate

    def iterator(self) -> BaseIterator[T]:
        return IndexFilteredIterator(self._source, self._predicate)


class CompositeSequence(Sequence[T]):
    """*head* followed by *tail*; sized when both halves are."""

    def __init__(self, head: Iterable[T], tail: Iterable[T]) -> None:
        _require(head, "head")
        _require(tail, "tail")
        self._head = head
        self._tail = tail

    def iterator(self) -> BaseIterator[T]:
        return CompositeIterator(self._head, self._tail)

    def sized(self) -> bool:
        return size_of(self._head).is_defined() and size_of(self._tail).is_defined()

    def size(self) -> int:
        if not self.sized():
            return super().size()
        return size_of(self._head).get() + size_of(self._tail).get()


class ZippedSequence(Sequence[tuple[A, B]]):
    """Pairs of two sources, truncated to the shorter or padded to the longer."""

    def __init__(
        self,
        a: Iterable[A],
        b: Iterable[B],
        default_a: A = _MISSING,
        default_b: B = _MISSING,
    ) -> None:
        _require(a, "a")
        _require(b, "b")
        if (default_a is _MISSING) != (default_b is _MISSING):
            raise IllegalArgumentError("zip defaults must be given together")
        self._a = a
        self._b = b
        self._default_a = default_a
        self._default_b = default_b

    @property
    def fills(self) -> bool:
        return self._default_a is not _MISSING

    def iterator(self) -> BaseIterator[tuple[A, B]]:
        if self.fills:
            return ZippedIterator(self._a, self._b, self._default_a, self._default_b)
        return ZippedIterator(self._a, self._b)

    def sized(self) -> bool:
        return size_of(self._a).is_defined() and size_of(self._b).is_defined()

    def size(self) -> int:
        if not self.sized():
            return super().size()
        sizes = (size_of(self._a).get(), size_of(self._b).get())
        return max(sizes) if self.fills else min(sizes)


class NilSequence(Sequence[Any]):
    """The empty sequence. Use the shared :data:`NIL` instance."""

    def iterator(self) -> BaseIterator[Any]:
        return pull_iterator(())

    def sized(self) -> bool:
        return True

    def size(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "NIL"


NIL: NilSequence = NilSequence()


__all__ = [
    "NIL",
    "CompositeSequence",
    "DelegateSequence",
    "FilteredSequence",
    "FlatMappedSequence",
    "IndexFilteredSequence",
    "MappedSequence",
    "NilSequence",
    "ZippedSequence",
]

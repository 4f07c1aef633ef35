"""Iterators – FilteredIterator and its three filter modes."""
from __future__ import annotations

import enum
import logging
from typing import Callable, Iterable, TypeVar

from lx_commons.collection.iterators.base import StatefulIterator, pull_iterator
from lx_commons.kernel.errors import NullReferenceError
from lx_commons.kernel.types import NONE, Option, Some

T = TypeVar("T")
logger = logging.getLogger(__name__)


class FilterType(enum.Enum):
    """How a :class:`FilteredIterator` applies its predicate.

    * ``ALL``   – keep every element that passes.
    * ``WHILE`` – keep elements until the first one that fails, then stop.
    * ``UNTIL`` – skip elements until the first one that passes, then keep
      that one and everything after it untested.
    """

    ALL = "all"
    WHILE = "while"
    UNTIL = "until"


class FilteredIterator(StatefulIterator[T]):
    def __init__(
        self,
        source: Iterable[T],
        predicate: Callable[[T], bool],
        filter_type: FilterType = FilterType.ALL,
    ) -> None:
        super().__init__()
        if predicate is None or filter_type is None:
            raise NullReferenceError("FilteredIterator requires a predicate and a filter type")
        self._source = pull_iterator(source)
        self._predicate = predicate
        self._type = filter_type
        self._started = False

    @property
    def filter_type(self) -> FilterType:
        return self._type

    def get_current(self) -> Option[T]:
        source = self._source
        while source.has_next():
            item = source.next()
            if self._type is FilterType.ALL:
                if self._predicate(item):
                    return Some(item)
            elif self._type is FilterType.WHILE:
                if self._predicate(item):
                    return Some(item)
                logger.debug("take-while stopped at first rejected element")
                return NONE
            else:
                if self._started:
                    return Some(item)
                if self._predicate(item):
                    self._started = True
                    return Some(item)
        return NONE


__all__ = ["FilterType", "FilteredIterator"]

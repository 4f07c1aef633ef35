"""Collection iterators – lazy, pull-based adapters over any iterable."""
from lx_commons.collection.iterators.base import (
    BaseIterator,
    CursorState,
    DelegateIterator,
    StatefulIterator,
    pull_iterator,
)
from lx_commons.collection.iterators.composite import CompositeIterator
from lx_commons.collection.iterators.factory import Iterators
from lx_commons.collection.iterators.filtered import FilteredIterator, FilterType
from lx_commons.collection.iterators.flat_mapped import FlatMappedIterator
from lx_commons.collection.iterators.index_filtered import IndexFilteredIterator
from lx_commons.collection.iterators.mapped import MappedIterator
from lx_commons.collection.iterators.zipped import ZippedIterator

__all__ = [
    "BaseIterator",
    "CompositeIterator",
    "CursorState",
    "DelegateIterator",
    "FilterType",
    "FilteredIterator",
    "FlatMappedIterator",
    "IndexFilteredIterator",
    "Iterators",
    "MappedIterator",
    "StatefulIterator",
    "ZippedIterator",
    "pull_iterator",
]

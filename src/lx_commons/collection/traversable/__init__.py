"""Collection traversables – lazy, order-agnostic views."""
from lx_commons.collection.traversable.base import Traversable, size_of
from lx_commons.collection.traversable.views import (
    DelegateTraversable,
    FilteredTraversable,
    FlatMappedTraversable,
    MappedTraversable,
)

__all__ = [
    "DelegateTraversable",
    "FilteredTraversable",
    "FlatMappedTraversable",
    "MappedTraversable",
    "Traversable",
    "size_of",
]

"""Collection sequences – lazy, order-sensitive views."""
from lx_commons.collection.sequence.array import Array
from lx_commons.collection.sequence.base import Sequence
from lx_commons.collection.sequence.views import (
    NIL,
    CompositeSequence,
    DelegateSequence,
    FilteredSequence,
    FlatMappedSequence,
    IndexFilteredSequence,
    MappedSequence,
    NilSequence,
    ZippedSequence,
)

__all__ = [
    "NIL",
    "Array",
    "CompositeSequence",
    "DelegateSequence",
    "FilteredSequence",
    "FlatMappedSequence",
    "IndexFilteredSequence",
    "MappedSequence",
    "NilSequence",
    "Sequence",
    "ZippedSequence",
]

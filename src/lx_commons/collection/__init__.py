"""Collection – lazy iterators, traversables and sequences.

Import path convention::

    from lx_commons.collection import Sequence, Traversable
    from lx_commons.collection.iterators import Iterators, FilterType
"""
from lx_commons.collection.iterators import FilterType, Iterators
from lx_commons.collection.sequence import NIL, Array, Sequence
from lx_commons.collection.traversable import Traversable

__all__ = ["NIL", "Array", "FilterType", "Iterators", "Sequence", "Traversable"]

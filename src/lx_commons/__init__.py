"""
lx_commons – language-extension commons: Option and lazy sequences.

Import path convention::

    from lx_commons.kernel.types import Option, Some, NONE
    from lx_commons.collection import Sequence, Traversable, Array
    from lx_commons.collection.iterators import Iterators, FilterType
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

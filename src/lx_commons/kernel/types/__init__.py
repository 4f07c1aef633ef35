"""Kernel value types – public re-export surface.

Modules:
  option.py – Option, Some, Nothing, NONE
"""

from lx_commons.kernel.types.option import NONE, Nothing, Option, Some, none, of_nullable, some

__all__ = ["NONE", "Nothing", "Option", "Some", "none", "of_nullable", "some"]

"""Testing fakes – instrumented sources and callables."""
from lx_commons.testing.fakes.sources import CallCounter, CountingIterable, UnsizedIterable

__all__ = ["CallCounter", "CountingIterable", "UnsizedIterable"]

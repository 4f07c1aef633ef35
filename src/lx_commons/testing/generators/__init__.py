"""Testing generators – Hypothesis strategies for lx-commons types."""
from lx_commons.testing.generators.strategies import array_strategy, option_strategy, sequence_strategy

__all__ = ["array_strategy", "option_strategy", "sequence_strategy"]

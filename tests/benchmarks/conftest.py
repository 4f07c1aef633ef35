"""conftest.py for benchmarks.

Provides shared input data so every benchmark in the session measures the
same workload.
"""

from __future__ import annotations

import pytest


@pytest.fixture(scope="session")
def numbers() -> list[int]:
    """Ten thousand integers, built once per session."""
    return list(range(10_000))

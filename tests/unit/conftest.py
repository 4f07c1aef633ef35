"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from lx_commons.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Every test starts from default settings and a clean LX_* environment."""
    for key in ("LX_STRICT_TAIL", "LX_LOG_LEVEL", "LX_JSON_LOGS"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()

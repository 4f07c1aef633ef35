"""Config settings – LangSettings and the process-wide accessor.

Environment variables (prefix ``LX``):

* ``LX_STRICT_TAIL`` – make ``Sequence.tail(n)`` on an unsized sequence
  raise instead of falling back to the first *n* elements.
* ``LX_LOG_LEVEL`` – level used by :func:`lx_commons.observability.logging.configure_logging`.
* ``LX_JSON_LOGS`` – render log records as JSON.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from lx_commons.config.settings.base import Settings
from lx_commons.config.settings.factory import SettingsFactory
from lx_commons.config.settings.loaders import EnvSettingsLoader
from lx_commons.config.validation import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class LangSettings(Settings):
    _prefix: ClassVar[str] = "LX"

    strict_tail: bool = False
    log_level: str = "WARNING"
    json_logs: bool = False

    def _validate(self) -> None:
        level = self.log_level.upper()
        if level not in _LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, f"expected one of {', '.join(_LEVELS)}")
        self.log_level = level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


_settings: LangSettings | None = None


def get_settings() -> LangSettings:
    """Return the active settings, loading them from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = SettingsFactory.create(LangSettings, loaders=[EnvSettingsLoader()])
    return _settings


def configure(settings: LangSettings) -> LangSettings:
    """Replace the active settings (mainly for tests and embedding applications)."""
    global _settings
    _settings = settings
    return settings


def reset_settings() -> None:
    """Forget the active settings; the next :func:`get_settings` reloads them."""
    global _settings
    _settings = None


__all__ = ["LangSettings", "configure", "get_settings", "reset_settings"]

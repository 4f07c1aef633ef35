"""Config – environment settings, loaders, and validation errors."""

from lx_commons.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    LangSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
    configure,
    get_settings,
    reset_settings,
)
from lx_commons.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LangSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "configure",
    "get_settings",
    "reset_settings",
]

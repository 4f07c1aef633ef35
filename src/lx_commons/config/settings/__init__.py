"""Config settings – env-based configuration."""
from lx_commons.config.settings.base import Settings
from lx_commons.config.settings.factory import SettingsFactory
from lx_commons.config.settings.lang import LangSettings, configure, get_settings, reset_settings
from lx_commons.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LangSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "configure",
    "get_settings",
    "reset_settings",
]

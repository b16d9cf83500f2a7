"""Config – client settings with documented defaults and env loaders."""

from purehttp.config.settings import ClientSettings, DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from purehttp.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ClientSettings",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]

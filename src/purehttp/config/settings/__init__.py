"""Config settings – 12-factor env-based configuration."""
from purehttp.config.settings.base import Settings
from purehttp.config.settings.client import ClientSettings
from purehttp.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["ClientSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]

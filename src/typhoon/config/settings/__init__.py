"""Config settings – 12-factor env-based configuration."""
from typhoon.config.settings.base import Settings
from typhoon.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]

"""Config – 12-factor settings and their validation errors."""
from typhoon.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from typhoon.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]

"""Config – 12-factor settings and loaders."""

from mp_hashing.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    HashingSettings,
    SettingsLoader,
)
from mp_hashing.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "HashingSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingsLoader",
]

"""Config settings – 12-factor env-based configuration."""
from mp_hashing.config.settings.hashing import (
    DEFAULT_ITERATIONS,
    DEFAULT_SALT_LENGTH,
    HashingSettings,
)
from mp_hashing.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DEFAULT_ITERATIONS",
    "DEFAULT_SALT_LENGTH",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "HashingSettings",
    "SettingsLoader",
]

"""Config validation errors raised while loading ``HASHING_*`` settings."""
from __future__ import annotations

from mp_hashing.kernel.errors import HashingError
from mp_hashing.kernel.security import DEFAULT_SENSITIVE_FIELDS


def _is_secret(setting_name: str) -> bool:
    # Matches both field names ("pepper") and env keys ("HASHING_PEPPER").
    name = setting_name.lower()
    return any(name == f or name.endswith(f"_{f}") for f in DEFAULT_SENSITIVE_FIELDS)


class ConfigError(HashingError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value is present but cannot be used; secret values are never echoed."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        shown = "***" if _is_secret(setting_name) else repr(value)
        super().__init__(
            f"Setting '{setting_name}' = {shown} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]

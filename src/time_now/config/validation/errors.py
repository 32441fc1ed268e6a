"""Config validation errors raised while reading ``TIME_NOW_*`` variables."""
from __future__ import annotations

from time_now.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration could not be turned into usable settings."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """An environment variable holds a value the settings cannot accept.

    ``env_key`` is the variable as the user set it (``TIME_NOW_LOG_LEVEL``)
    and ``value`` is the raw string read from the environment.
    """
    default_code = "invalid_setting_value"

    def __init__(self, env_key: str, value: str, reason: str) -> None:
        super().__init__(
            f"{env_key}={value!r} is invalid: {reason}",
            detail={"env_key": env_key, "value": value, "reason": reason},
        )
        self.env_key = env_key
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]

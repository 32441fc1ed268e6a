"""Config – settings and validation."""
from time_now.config.settings import EnvSettingsLoader, Settings, TimeNowSettings
from time_now.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "TimeNowSettings",
]

"""Config validation errors."""
from time_now.config.validation.errors import ConfigError, InvalidSettingValueError

__all__ = ["ConfigError", "InvalidSettingValueError"]

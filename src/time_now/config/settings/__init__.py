"""Config settings – env-based configuration."""
from time_now.config.settings.app import TimeNowSettings
from time_now.config.settings.base import Settings
from time_now.config.settings.loaders import EnvSettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "TimeNowSettings"]

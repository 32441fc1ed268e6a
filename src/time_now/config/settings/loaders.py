"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
from typing import TypeVar

from time_now.config.settings.base import Settings

T = TypeVar("T", bound=Settings)


class EnvSettingsLoader:
    """Load settings from OS environment variables.

    Unset variables leave the field default in place; validation is left to
    the settings class so that errors name the variable the user set.
    """

    def load(self, settings_class: type[T]) -> T:
        kwargs: dict[str, str] = {}
        for field in dataclasses.fields(settings_class):
            raw = os.environ.get(settings_class.env_key(field.name))
            if raw is not None:
                kwargs[field.name] = raw
        return settings_class(**kwargs)


__all__ = ["EnvSettingsLoader"]

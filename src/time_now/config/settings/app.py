"""Config settings – TimeNowSettings for the ``time-now`` entry point."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from time_now.config.settings.base import Settings
from time_now.config.validation import InvalidSettingValueError

LOG_FORMATS = frozenset({"console", "json"})


@dataclasses.dataclass
class TimeNowSettings(Settings):
    """Logging options read from ``TIME_NOW_*`` environment variables."""

    _prefix: ClassVar[str] = "TIME_NOW"

    log_level: str = "WARNING"
    log_format: str = "console"

    def _validate(self) -> None:
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InvalidSettingValueError(
                self.env_key("log_level"), self.log_level, "unknown logging level"
            )
        log_format = self.log_format.lower()
        if log_format not in LOG_FORMATS:
            raise InvalidSettingValueError(
                self.env_key("log_format"),
                self.log_format,
                f"expected one of {sorted(LOG_FORMATS)}",
            )
        self.log_level = level
        self.log_format = log_format

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    @property
    def json(self) -> bool:
        return self.log_format == "json"


__all__ = ["LOG_FORMATS", "TimeNowSettings"]

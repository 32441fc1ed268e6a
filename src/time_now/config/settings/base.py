"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """String-valued settings read from ``<PREFIX>_<FIELD>`` variables.

    Subclasses give every field a default and normalise or reject the raw
    strings in :meth:`_validate`.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable that feeds *field_name*."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Override to normalise values and reject invalid ones."""


__all__ = ["Settings"]

"""Infrastructure errors — faults in the host environment."""

from __future__ import annotations

from typing import Any

from time_now.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Host / I/O failure that is not a value-object violation."""

    default_code = "infrastructure_error"


class ClockError(InfrastructureError):
    """The host clock returned a reading that cannot be used."""

    default_code = "clock_error"


class ClockBeforeEpochError(ClockError):
    """The host clock reports an instant earlier than the Unix epoch.

    Only a misconfigured host can trigger this. Callers decide whether it is
    fatal; ``offset_ns`` is how far before the epoch the reading was.
    """

    default_code = "clock_before_epoch"

    def __init__(
        self,
        offset_ns: int,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = {"offset_ns": offset_ns, **kwargs.pop("detail", {})}
        super().__init__(
            message or f"System clock is {offset_ns} ns earlier than the Unix epoch",
            detail=detail,
            **kwargs,
        )
        self.offset_ns = offset_ns


__all__ = [
    "ClockBeforeEpochError",
    "ClockError",
    "InfrastructureError",
]

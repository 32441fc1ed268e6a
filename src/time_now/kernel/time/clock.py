"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta
from typing import Protocol

from time_now.kernel.time.duration import NANOS_PER_MICRO

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class Clock(Protocol):
    """Port: source of wall-clock readings.

    ``time_ns`` returns signed nanoseconds relative to :data:`UNIX_EPOCH`;
    a negative value means the source is set before the epoch.
    """

    def time_ns(self) -> int: ...


class SystemClock:
    """Production clock that delegates to :func:`time.time_ns`."""

    def time_ns(self) -> int:
        return time.time_ns()


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        if fixed.tzinfo is None:
            fixed = fixed.replace(tzinfo=UTC)
        self._nanos = (fixed - UNIX_EPOCH) // timedelta(microseconds=1) * NANOS_PER_MICRO

    @classmethod
    def from_nanos(cls, nanos: int) -> FrozenClock:
        """Pin the clock to *nanos* since the epoch (may be negative)."""
        clock = cls(UNIX_EPOCH)
        clock._nanos = nanos
        return clock

    def time_ns(self) -> int:
        return self._nanos

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._nanos += timedelta(**kwargs) // timedelta(microseconds=1) * NANOS_PER_MICRO

    def advance_nanos(self, nanos: int) -> None:
        self._nanos += nanos


__all__ = ["UNIX_EPOCH", "Clock", "FrozenClock", "SystemClock"]

"""Clock Reader – elapsed wall-clock time since the Unix epoch.

Every accessor takes one reading from a :class:`~time_now.kernel.time.Clock`
and converts it; nothing is cached between calls.  The module-level
functions read :class:`~time_now.kernel.time.SystemClock` and are what
``time_now`` re-exports::

    import time_now

    time_now.now_as_millis()        # 1704067200123
    time_now.duration_since_epoch() # Duration(secs=1704067200, nanos=123456789)
"""
from __future__ import annotations

from time_now.kernel.errors import ClockBeforeEpochError
from time_now.kernel.time import Clock, Duration, SystemClock
from time_now.observability.logging import get_logger

_log = get_logger(__name__)


class ClockReader:
    """Read a :class:`Clock` and express the reading in various units.

    Args:
        clock: Time source; defaults to the host wall clock.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock if clock is not None else SystemClock()

    @property
    def clock(self) -> Clock:
        return self._clock

    def duration_since_epoch(self) -> Duration:
        """Return the elapsed time since the Unix epoch.

        Raises:
            ClockBeforeEpochError: the clock reads earlier than the epoch.
        """
        nanos = self._clock.time_ns()
        if nanos < 0:
            _log.error("clock.before_epoch", offset_ns=-nanos, clock=type(self._clock).__name__)
            raise ClockBeforeEpochError(-nanos)
        return Duration.from_nanos(nanos)

    def now_as_secs(self) -> int:
        return self.duration_since_epoch().as_secs()

    def now_as_secs_f32(self) -> float:
        return self.duration_since_epoch().as_secs_f32()

    def now_as_secs_f64(self) -> float:
        return self.duration_since_epoch().as_secs_f64()

    def now_as_millis(self) -> int:
        return self.duration_since_epoch().as_millis()

    def now_as_micros(self) -> int:
        return self.duration_since_epoch().as_micros()

    def now_as_nanos(self) -> int:
        return self.duration_since_epoch().as_nanos()


_system_reader = ClockReader(SystemClock())


def duration_since_epoch() -> Duration:
    """:class:`Duration` since the Unix epoch, read from the host clock."""
    return _system_reader.duration_since_epoch()


def now_as_secs() -> int:
    """Whole seconds since the Unix epoch; the sub-second part is truncated."""
    return _system_reader.now_as_secs()


def now_as_secs_f32() -> float:
    """Seconds since the Unix epoch at single precision."""
    return _system_reader.now_as_secs_f32()


def now_as_secs_f64() -> float:
    """Seconds since the Unix epoch, including the fractional part."""
    return _system_reader.now_as_secs_f64()


def now_as_millis() -> int:
    """Whole milliseconds since the Unix epoch."""
    return _system_reader.now_as_millis()


def now_as_micros() -> int:
    """Whole microseconds since the Unix epoch."""
    return _system_reader.now_as_micros()


def now_as_nanos() -> int:
    """Nanoseconds since the Unix epoch."""
    return _system_reader.now_as_nanos()


__all__ = [
    "ClockReader",
    "duration_since_epoch",
    "now_as_micros",
    "now_as_millis",
    "now_as_nanos",
    "now_as_secs",
    "now_as_secs_f32",
    "now_as_secs_f64",
]

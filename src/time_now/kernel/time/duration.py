"""Kernel time – Duration value object.

A non-negative span of time with nanosecond resolution, stored as whole
seconds plus a sub-second nanosecond remainder.  ``datetime.timedelta`` stops
at microseconds, which is why the conversions live here instead.
"""
from __future__ import annotations

import dataclasses
import struct
from datetime import timedelta
from typing import ClassVar

from time_now.kernel.errors import ValidationError

NANOS_PER_SEC = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_MICRO = 1_000


def _to_f32(value: float) -> float:
    """Round *value* to the nearest IEEE-754 single precision float."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclasses.dataclass(frozen=True, order=True)
class Duration:
    """Immutable elapsed time.

    Args:
        secs: Whole seconds, ``>= 0``.
        nanos: Sub-second nanoseconds, ``0 <= nanos < 1_000_000_000``.
    """

    secs: int
    nanos: int = 0

    ZERO: ClassVar[Duration]

    def __post_init__(self) -> None:
        if self.secs < 0:
            raise ValidationError(
                "Duration cannot be negative",
                errors=[{"field": "secs", "value": self.secs}],
            )
        if not 0 <= self.nanos < NANOS_PER_SEC:
            raise ValidationError(
                "Duration nanos must be in [0, 1_000_000_000)",
                errors=[{"field": "nanos", "value": self.nanos}],
            )

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_nanos(cls, nanos: int) -> Duration:
        secs, rem = divmod(nanos, NANOS_PER_SEC)
        return cls(secs, rem)

    @classmethod
    def from_micros(cls, micros: int) -> Duration:
        return cls.from_nanos(micros * NANOS_PER_MICRO)

    @classmethod
    def from_millis(cls, millis: int) -> Duration:
        return cls.from_nanos(millis * NANOS_PER_MILLI)

    @classmethod
    def from_secs(cls, secs: int) -> Duration:
        return cls(secs)

    # ------------------------------------------------------------------
    # Whole-unit conversions (truncating)
    # ------------------------------------------------------------------

    def as_secs(self) -> int:
        """Whole seconds; the fractional part is dropped, not rounded."""
        return self.secs

    def as_millis(self) -> int:
        return self.as_nanos() // NANOS_PER_MILLI

    def as_micros(self) -> int:
        return self.as_nanos() // NANOS_PER_MICRO

    def as_nanos(self) -> int:
        return self.secs * NANOS_PER_SEC + self.nanos

    def subsec_millis(self) -> int:
        return self.nanos // NANOS_PER_MILLI

    def subsec_micros(self) -> int:
        return self.nanos // NANOS_PER_MICRO

    def subsec_nanos(self) -> int:
        return self.nanos

    # ------------------------------------------------------------------
    # Fractional conversions
    # ------------------------------------------------------------------

    def as_secs_f64(self) -> float:
        """Seconds including the fractional part, double precision.

        At present-day magnitudes a double resolves about 0.24 us, so a
        reading within that distance of the next second rounds up to it:
        ``Duration(1_704_067_200, 999_999_999).as_secs_f64()`` is
        ``1704067201.0``. The difference from :meth:`as_secs` is therefore in
        ``[0.0, 1.0]``, not ``[0.0, 1.0)``.
        """
        return self.secs + self.nanos / NANOS_PER_SEC

    def as_secs_f32(self) -> float:
        """Seconds including the fractional part, single precision.

        Present-day epoch offsets need more than the 24 bits of an f32
        mantissa, so the result is only accurate to about two minutes.
        """
        return _to_f32(self.as_secs_f64())

    def to_timedelta(self) -> timedelta:
        """Convert to :class:`~datetime.timedelta`, truncating to microseconds."""
        return timedelta(seconds=self.secs, microseconds=self.subsec_micros())

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_nanos(self.as_nanos() + other.as_nanos())

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        diff = self.as_nanos() - other.as_nanos()
        if diff < 0:
            raise ValidationError(
                "Duration subtraction would be negative",
                errors=[{"field": "nanos", "value": diff}],
            )
        return Duration.from_nanos(diff)


Duration.ZERO = Duration(0)


__all__ = ["Duration", "NANOS_PER_MICRO", "NANOS_PER_MILLI", "NANOS_PER_SEC"]

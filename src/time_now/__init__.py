"""
time_now – current wall-clock time since the Unix epoch, in any unit.

Import path convention::

    from time_now import now_as_millis, duration_since_epoch
    from time_now.kernel.time import Duration, FrozenClock
    from time_now.kernel.errors import ClockBeforeEpochError
"""

from time_now.kernel.errors import ClockBeforeEpochError
from time_now.kernel.time import UNIX_EPOCH, Duration
from time_now.reader import (
    ClockReader,
    duration_since_epoch,
    now_as_micros,
    now_as_millis,
    now_as_nanos,
    now_as_secs,
    now_as_secs_f32,
    now_as_secs_f64,
)

__version__ = "0.1.0"
__all__ = [
    "UNIX_EPOCH",
    "ClockBeforeEpochError",
    "ClockReader",
    "Duration",
    "__version__",
    "duration_since_epoch",
    "now_as_micros",
    "now_as_millis",
    "now_as_nanos",
    "now_as_secs",
    "now_as_secs_f32",
    "now_as_secs_f64",
]

"""Kernel time – Clock port, Duration value object and the epoch constant."""
from time_now.kernel.time.clock import UNIX_EPOCH, Clock, FrozenClock, SystemClock
from time_now.kernel.time.duration import Duration

__all__ = ["UNIX_EPOCH", "Clock", "Duration", "FrozenClock", "SystemClock"]

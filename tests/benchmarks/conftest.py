"""conftest.py for benchmarks.

Provides a reader over a frozen clock so conversion cost can be measured
apart from the cost of the system call.
"""

from __future__ import annotations

import pytest

from time_now.kernel.time import FrozenClock
from time_now.reader import ClockReader


@pytest.fixture(scope="session")
def frozen_reader() -> ClockReader:
    """Session-scoped reader pinned to 2024-01-01T00:00:00.123456789Z."""
    return ClockReader(FrozenClock.from_nanos(1_704_067_200_123_456_789))

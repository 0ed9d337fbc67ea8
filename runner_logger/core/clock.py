"""
Elapsed time tracking shared by all loggers of a provider
"""

import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional


def utc_now() -> datetime:
    """Current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


class TimeOffsetTracker:
    """
    Converts "now" into the elapsed time since first use.

    The reference timestamp is captured lazily by the first caller of
    offset(); concurrent first calls resolve under a lock so every caller
    observes the same reference. The clock is a wall clock: adjustments to
    the system time show up in the offsets.

    Thread Safety:
        offset() may be called from any thread.
    """

    def __init__(self, now: Optional[Callable[[], datetime]] = None):
        """
        Initialize tracker.

        Args:
            now: Clock function (default: current UTC time)
        """
        self._now = now or utc_now
        self._start_time: Optional[datetime] = None
        self._lock = threading.Lock()

    @property
    def start_time(self) -> Optional[datetime]:
        """Reference timestamp, or None before the first offset() call."""
        return self._start_time

    def offset(self) -> timedelta:
        """
        Get elapsed time since the reference timestamp.

        Returns:
            timedelta(0) on the first call, ``now - reference`` afterwards
        """
        time = self._now()
        if self._start_time is None:
            with self._lock:
                if self._start_time is None:
                    self._start_time = time
                    return timedelta(0)
        return time - self._start_time

"""
Process-wide rate limiter.

iNaturalist asks for ~1 request/second (60/min, 10k/day) and NCBI allows
3/second without an API key. One limiter is shared by every fetcher, so the
spacing is measured across all calls combined, not per source.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

MIN_REQUEST_INTERVAL: float = 1.0  # seconds


class RateLimiter:
    """Keeps successive ``acquire()`` completions at least ``min_interval`` apart."""

    def __init__(
        self,
        min_interval: float = MIN_REQUEST_INTERVAL,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._last_request_time: float | None = None
        self._call_count = 0

    @property
    def call_count(self) -> int:
        """Number of ``acquire()`` calls since construction or the last ``reset()``."""
        return self._call_count

    def acquire(self) -> None:
        """Sleep if needed, then record one external call."""
        with self._lock:
            if self._last_request_time is not None:
                elapsed = self._clock() - self._last_request_time
                if elapsed < self.min_interval:
                    self._sleep(self.min_interval - elapsed)
            self._last_request_time = self._clock()
            self._call_count += 1

    def reset(self) -> None:
        """Zero the call counter. Spacing from the previous call still applies."""
        with self._lock:
            self._call_count = 0

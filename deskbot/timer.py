"""A simple stopwatch for timing code."""

from __future__ import annotations

import sys
import time
from typing import Callable

_NS_PER_MS = 1_000_000


class Stopwatch:
    """Measures time since ``start`` using a monotonic nanosecond clock."""

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self._clock = clock
        self._started_at: int | None = None

    @property
    def is_started(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        """Start, or restart, the measurement."""
        self._started_at = self._clock()

    def _elapsed(self, reset: bool) -> int:
        if self._started_at is None:
            raise RuntimeError("Stopwatch has not been started")
        now = self._clock()
        elapsed = now - self._started_at
        if reset:
            self._started_at = now
        return elapsed

    def elapsed_ms(self, reset: bool = False) -> int:
        """Whole milliseconds since start; optionally restart the measurement."""
        return self._elapsed(reset) // _NS_PER_MS

    def elapsed_ns(self, reset: bool = False) -> int:
        """Nanoseconds since start; optionally restart the measurement."""
        return self._elapsed(reset)

    def print_ms(self, reset: bool = False) -> int:
        """Write the elapsed milliseconds to standard error and return them."""
        value = self.elapsed_ms(reset)
        print(value, file=sys.stderr)
        return value
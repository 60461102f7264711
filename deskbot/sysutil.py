"""System measurements: overall CPU load between successive samples."""

from __future__ import annotations

import psutil


class CpuLoadCalculator:
    """Turns cumulative idle/total tick counters into a load fraction.

    Each result covers the interval since the previous call, so the
    calculator has to be fed at regular intervals.
    """

    def __init__(self) -> None:
        self.previous_total_ticks = 0
        self.previous_idle_ticks = 0

    def calculate(self, idle_ticks: float, total_ticks: float) -> float:
        """Load since the last call: 1.0 is fully busy, 0.0 is idle."""
        total_since = total_ticks - self.previous_total_ticks
        idle_since = idle_ticks - self.previous_idle_ticks
        idle_fraction = idle_since / total_since if total_since > 0 else 0.0
        self.previous_total_ticks = total_ticks
        self.previous_idle_ticks = idle_ticks
        return 1.0 - idle_fraction

    def sample(self) -> float:
        """Read the system CPU counters and return the load, or -1.0 on error."""
        try:
            times = psutil.cpu_times()
        except (OSError, psutil.Error):
            return -1.0
        return self.calculate(times.idle, sum(times))


_shared_calculator = CpuLoadCalculator()


def get_cpu_load() -> float:
    """CPU load since the previous call in this process, or -1.0 on error."""
    return _shared_calculator.sample()
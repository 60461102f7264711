"""Background watcher that reports sustained high CPU load and its end."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable

from .sysutil import get_cpu_load


@dataclass(frozen=True)
class CPUWatcherConfig:
    """Thresholds in percent and durations in seconds."""

    high_threshold: int = 80
    high_duration: int = 4
    low_threshold: int = 20
    low_duration: int = 2


def _nothing() -> None:
    return None


class CPUWatcher:
    """Samples CPU load twice per interval second on a worker thread.

    ``on_high`` runs once the load has stayed above the high threshold long
    enough; ``on_low`` runs once it has then stayed below the low threshold.
    """

    SAMPLES_PER_SECOND = 2

    def __init__(
        self,
        config: CPUWatcherConfig = CPUWatcherConfig(),
        on_high: Callable[[], None] = _nothing,
        on_low: Callable[[], None] = _nothing,
        cpu_load: Callable[[], float] = get_cpu_load,
        poll_interval: float = 0.5,
    ) -> None:
        self.config = config
        self._on_high = on_high
        self._on_low = on_low
        self._cpu_load = cpu_load
        self._poll_interval = poll_interval
        self._stop = threading.Event()
        self._stop.set()
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return (
            not self._stop.is_set()
            and self._thread is not None
            and self._thread.is_alive()
        )

    def start_monitoring(self) -> None:
        """Start the worker unless it is already monitoring."""
        with self._lock:
            if self._thread is not None and self._thread.is_alive():
                if not self._stop.is_set():
                    return
                self._thread.join()
            self._stop.clear()
            self._thread = threading.Thread(
                target=self._monitor, name="cpu-watcher", daemon=True
            )
            self._thread.start()

    def stop_monitoring(self) -> None:
        """Ask the worker to stop after its current sample."""
        self._stop.set()

    def _monitor(self) -> None:
        while not self._stop.is_set():
            if not self._wait_for_high():
                return
            self._on_high()
            if self._wait_for_low():
                self._on_low()

    def _wait_for_high(self) -> bool:
        limit = self.config.high_threshold / 100.0
        needed = self.config.high_duration * self.SAMPLES_PER_SECOND
        cycles = 0
        while not self._stop.is_set():
            cycles = cycles + 1 if self._cpu_load() > limit else 0
            if cycles >= needed:
                return True
            self._stop.wait(self._poll_interval)
        return False

    def _wait_for_low(self) -> bool:
        limit = self.config.low_threshold / 100.0
        needed = self.config.low_duration * self.SAMPLES_PER_SECOND
        cycles = 0
        while not self._stop.is_set():
            cycles = cycles + 1 if self._cpu_load() < limit else 0
            if cycles > needed:
                return True
            self._stop.wait(self._poll_interval)
        return False
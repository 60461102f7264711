import threading

import pytest

from deskbot.cpu_watcher import CPUWatcher, CPUWatcherConfig

QUICK = CPUWatcherConfig(high_threshold=80, high_duration=1, low_threshold=20, low_duration=1)


def run_watcher(loads, config=QUICK):
    events = []
    samples = iter(loads)
    holder = {}

    def cpu_load():
        try:
            return next(samples)
        except StopIteration:
            holder["watcher"].stop_monitoring()
            return 0.5

    watcher = CPUWatcher(
        config,
        on_high=lambda: events.append("high"),
        on_low=lambda: events.append("low"),
        cpu_load=cpu_load,
        poll_interval=0,
    )
    holder["watcher"] = watcher
    watcher.start_monitoring()
    watcher._thread.join(5)
    assert not watcher.is_running
    return events


@pytest.mark.parametrize(
    "loads, expected",
    [
        ([0.9, 0.9], ["high"]),
        ([0.9], []),
        ([0.9, 0.5, 0.9], []),
        ([0.8, 0.8, 0.8], []),
        ([0.9, 0.9, 0.1, 0.1, 0.1], ["high", "low"]),
        ([0.9, 0.9, 0.1, 0.1], ["high"]),
        ([0.9, 0.9, 0.1, 0.1, 0.5, 0.1], ["high"]),
        ([0.9, 0.9, 0.1, 0.1, 0.1, 0.9, 0.9], ["high", "low", "high"]),
    ],
)
def test_transitions(loads, expected):
    assert run_watcher(loads) == expected


def test_longer_high_duration_needs_more_samples():
    config = CPUWatcherConfig(high_threshold=80, high_duration=2, low_threshold=20, low_duration=1)
    assert run_watcher([0.9, 0.9, 0.9], config) == []
    assert run_watcher([0.9, 0.9, 0.9, 0.9], config) == ["high"]


def test_start_twice_keeps_one_worker():
    release = threading.Event()
    watcher = CPUWatcher(QUICK, cpu_load=lambda: 0.5, poll_interval=0.01)
    watcher.start_monitoring()
    first = watcher._thread
    watcher.start_monitoring()
    assert watcher._thread is first
    watcher.stop_monitoring()
    first.join(5)
    release.set()
    assert not first.is_alive()


def test_stop_monitoring_ends_worker():
    watcher = CPUWatcher(QUICK, cpu_load=lambda: 0.5, poll_interval=0.01)
    watcher.start_monitoring()
    assert watcher.is_running
    watcher.stop_monitoring()
    watcher._thread.join(5)
    assert watcher.is_running is False


def test_restart_after_stop():
    watcher = CPUWatcher(QUICK, cpu_load=lambda: 0.5, poll_interval=0.01)
    watcher.start_monitoring()
    watcher.stop_monitoring()
    watcher.start_monitoring()
    assert watcher.is_running
    watcher.stop_monitoring()
    watcher._thread.join(5)
    assert not watcher._thread.is_alive()
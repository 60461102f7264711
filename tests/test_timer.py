import pytest

from deskbot.timer import Stopwatch


def make_clock(values):
    samples = iter(values)
    return lambda: next(samples)


def test_elapsed_before_start_raises():
    watch = Stopwatch(clock=make_clock([0]))
    with pytest.raises(RuntimeError):
        watch.elapsed_ms()


def test_is_started_after_start():
    watch = Stopwatch(clock=make_clock([5]))
    assert watch.is_started is False
    watch.start()
    assert watch.is_started is True


def test_elapsed_ns_is_clock_difference():
    watch = Stopwatch(clock=make_clock([1_000, 4_500]))
    watch.start()
    assert watch.elapsed_ns() == 4_500 - 1_000


def test_elapsed_ms_truncates():
    watch = Stopwatch(clock=make_clock([1_000_000_000, 1_250_900_000]))
    watch.start()
    assert watch.elapsed_ms() == 250


def test_without_reset_keeps_start():
    watch = Stopwatch(clock=make_clock([100, 300, 700]))
    watch.start()
    assert watch.elapsed_ns() == 200
    assert watch.elapsed_ns() == 600


def test_reset_restarts_from_now():
    watch = Stopwatch(clock=make_clock([100, 300, 700]))
    watch.start()
    assert watch.elapsed_ns(reset=True) == 200
    assert watch.elapsed_ns() == 400


def test_print_ms_writes_and_returns(capsys):
    watch = Stopwatch(clock=make_clock([0, 3_000_000]))
    watch.start()
    value = watch.print_ms()
    assert value == 3
    assert capsys.readouterr().err.strip() == "3"


def test_real_clock_is_non_negative():
    watch = Stopwatch()
    watch.start()
    assert watch.elapsed_ns() >= 0
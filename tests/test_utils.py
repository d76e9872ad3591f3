from datetime import timedelta

import pytest

from thermoweb.utils import stopwatch


@pytest.fixture()
def clock(mocker):
    now = mocker.Mock(return_value=10.0)
    mocker.patch("time.monotonic", now)
    return now


def test_measures_time_spent_in_block(clock):
    with stopwatch() as s:
        clock.return_value = 12.5

    clock.return_value = 100.0
    assert s.elapsed_time == timedelta(seconds=2.5)


def test_reads_running_time_inside_block(clock):
    with stopwatch() as s:
        clock.return_value = 11.0
        assert s.elapsed_time == timedelta(seconds=1)
        clock.return_value = 14.0


def test_formats_as_seconds(clock):
    with stopwatch() as s:
        clock.return_value = 10.25

    assert str(s) == "0.250s"


def test_stops_when_block_raises(clock):
    with pytest.raises(ZeroDivisionError):
        with stopwatch() as s:
            clock.return_value = 13.0
            1 / 0

    clock.return_value = 50.0
    assert s.elapsed_time == timedelta(seconds=3)


def test_unused_stopwatch_has_no_time():
    with pytest.raises(RuntimeError, match="never started"):
        stopwatch().elapsed_time

from datetime import datetime, timedelta

import pytest

from taxor.stopclock import Durations, StopClock, TimeMeasures, now_nanos

T0 = datetime(2023, 1, 1, 12, 0, 0)


def _fake_clock(*offsets):
    times = iter(T0 + timedelta(seconds=o) for o in offsets)
    return lambda: next(times)


def test_single_round():
    clock = StopClock(clock=_fake_clock(0, 2))
    clock.start()
    clock.stop()
    assert clock.elapsed == 2.0
    assert clock.begin == T0
    assert clock.end == T0 + timedelta(seconds=2)


def test_rounds_accumulate_and_begin_is_first_start():
    clock = StopClock(clock=_fake_clock(0, 2, 10, 11))
    clock.start()
    clock.stop()
    clock.start()
    clock.stop()
    assert clock.elapsed == 3.0
    assert clock.runtime == timedelta(seconds=3)
    assert clock.begin == T0
    assert clock.begin_round == T0 + timedelta(seconds=10)


def test_decrement_start_moves_round_back_by_whole_seconds():
    clock = StopClock(clock=_fake_clock(5, 5))
    clock.start()
    clock.decrement_start(2.5)
    assert clock.begin_round == T0 + timedelta(seconds=3)
    assert clock.elapsed == 2.5
    clock.stop()
    assert clock.elapsed == 4.5


def test_set_begin_changes_round_start():
    clock = StopClock(clock=_fake_clock(0, 20))
    clock.start()
    clock.set_begin(T0 + timedelta(seconds=15))
    clock.stop()
    assert clock.elapsed == 5.0
    assert clock.begin == T0


def test_stop_before_start_raises():
    with pytest.raises(RuntimeError):
        StopClock().stop()


def test_real_clock_is_nonnegative():
    clock = StopClock()
    clock.start()
    clock.stop()
    assert clock.elapsed >= 0.0
    assert clock.end >= clock.begin


def test_now_nanos_is_monotonic():
    first = now_nanos()
    second = now_nanos()
    assert second >= first


def test_defaults():
    durations = Durations()
    assert (
        durations.complete_classified,
        durations.complete_unclassified,
        durations.basecalling,
        durations.classification,
    ) == (0.0, 0.0, 0.0, 0.0)
    measures = TimeMeasures()
    assert measures.complete_read.elapsed == 0.0
    assert measures.complete_read is not measures.classify_read
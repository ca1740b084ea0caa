"""Wall-clock stopwatch that accumulates running time over rounds."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta


def now_nanos() -> int:
    """Current value of a monotonic clock in nanoseconds."""
    return time.monotonic_ns()


class StopClock:
    """Stopwatch; ``begin`` is the first start, ``elapsed`` the summed rounds."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._first_start = True
        self._begin: datetime | None = None
        self._begin_round: datetime | None = None
        self._end: datetime | None = None
        self._runtime = timedelta(0)

    def start(self) -> None:
        """Start a new round; the first call also sets ``begin``."""
        self._begin_round = self._clock()
        if self._first_start:
            self._begin = self._begin_round
            self._first_start = False

    def stop(self) -> None:
        """End the current round and add its duration to the running time."""
        if self._begin_round is None:
            raise RuntimeError("stop() called before start()")
        self._end = self._clock()
        self._runtime += self._end - self._begin_round

    def decrement_start(self, elapsed: float) -> None:
        """Add ``elapsed`` seconds and move the round start back by whole seconds."""
        if self._begin_round is not None:
            self._begin_round -= timedelta(seconds=int(elapsed))
        self._runtime += timedelta(seconds=elapsed)

    def set_begin(self, begin: datetime) -> None:
        """Set the start of the current round."""
        self._begin_round = begin

    @property
    def elapsed(self) -> float:
        """Accumulated running time in seconds."""
        return self._runtime.total_seconds()

    @property
    def runtime(self) -> timedelta:
        return self._runtime

    @property
    def begin(self) -> datetime | None:
        return self._begin

    @property
    def begin_round(self) -> datetime | None:
        return self._begin_round

    @property
    def end(self) -> datetime | None:
        return self._end


@dataclass
class TimeMeasures:
    """Stopwatches used while handling a read."""

    complete_read: StopClock = field(default_factory=StopClock)
    basecall_read: StopClock = field(default_factory=StopClock)
    classify_read: StopClock = field(default_factory=StopClock)


@dataclass
class Durations:
    """Summed durations, in seconds, of the stages of read handling."""

    complete_classified: float = 0.0
    complete_unclassified: float = 0.0
    basecalling: float = 0.0
    classification: float = 0.0
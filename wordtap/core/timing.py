from __future__ import annotations

import logging
import math
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class TimingEngine:
    """Session stopwatch that leaves paused intervals out of the elapsed time.

    Pausing only remembers when the pause began. Resuming pushes the start time
    forward by the length of the pause, so ``now - start`` is always the active
    typing time. Timestamps come from ``clock`` (``time.monotonic`` by default).
    """

    def __init__(self, clock: Clock = time.monotonic) -> None:
        self._clock = clock
        self._start_time: Optional[float] = None
        self._paused_at: Optional[float] = None
        self._finished: Optional[float] = None

    @property
    def start_time(self) -> Optional[float]:
        """Clock reading of the first keystroke, shifted forward by every resumed pause."""
        return self._start_time

    @property
    def paused_at(self) -> Optional[float]:
        """When the current pause began, or None while not paused."""
        return self._paused_at

    @property
    def finished_duration(self) -> Optional[float]:
        """Elapsed seconds recorded by ``finish``, or None while running."""
        return self._finished

    @property
    def is_started(self) -> bool:
        """True once ``start`` has run for this session."""
        return self._start_time is not None

    def now(self) -> float:
        """Current reading of the injected clock."""
        return self._clock()

    def reset(self) -> None:
        """Forget start, pause and finish for a new session."""
        self._start_time = None
        self._paused_at = None
        self._finished = None

    def start(self) -> None:
        """Record the start time; later calls keep the first one."""
        if self._start_time is None:
            self._start_time = self._clock()

    def pause(self) -> float:
        """Remember the pause moment and return it."""
        self._paused_at = self._clock()
        return self._paused_at

    def resume(self) -> None:
        """End a pause, shifting the start time by its length.

        A negative or non-finite shift leaves the start time unchanged.
        """
        if self._paused_at is None:
            return
        paused_at, self._paused_at = self._paused_at, None
        if self._start_time is None:
            return
        gap = self._clock() - paused_at
        shifted = self._start_time + gap
        if gap < 0 or not math.isfinite(shifted):
            logger.debug("Ignoring pause gap %r, start time left unchanged", gap)
            return
        self._start_time = shifted

    def elapsed(self) -> float:
        """Active seconds so far; a paused session reads as frozen at the pause."""
        if self._finished is not None:
            return self._finished
        if self._start_time is None:
            return 0.0
        end = self._paused_at if self._paused_at is not None else self._clock()
        return max(0.0, end - self._start_time)

    def finish(self) -> float:
        """Record and return the active duration in seconds, rounded to milliseconds.

        Raises ``RuntimeError`` before ``start`` or on a second call.
        """
        if self._start_time is None:
            raise RuntimeError("Cannot finish timing before it has started")
        if self._finished is not None:
            raise RuntimeError("Timing already finished for this session")
        # millisecond resolution
        self._finished = round(max(0.0, self._clock() - self._start_time), 3)
        return self._finished

# timer.py
from __future__ import annotations
import logging
from enum import Enum
from typing import Callable, List, Optional

import time_format
from scheduler import SchedScheduler, Scheduler
from time_format import TimeFormat

logger = logging.getLogger(__name__)

DEFAULT_GRANULARITY_MS = 1000


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class CountdownTimer:
    """
    a countdown timer
    counts a 'HH:MM:SS' or 'MM:SS' duration down one second per tick,
    calls tick callbacks with the remaining seconds and the stop callback once at zero.
    there is no pause and no cancel: once started it runs to the end,
    and a stopped timer can not be started again
    """
    def __init__(self,
                 duration: str,
                 granularity: Optional[int] = None,
                 scheduler: Optional[Scheduler] = None):
        # raises FormatError before any state is set
        seconds, fmt = time_format.parse(duration)

        if not granularity:
            granularity = DEFAULT_GRANULARITY_MS
        if isinstance(granularity, bool) or not isinstance(granularity, int) or granularity <= 0:
            raise ValueError(f"granularity must be a positive integer of milliseconds, got {granularity!r}")

        self._duration = seconds # remaining seconds, may dip to -1 after the last cycle
        self._time_format = fmt # shape of the input, kept for formatting
        self._granularity = granularity # ms between ticks
        self._scheduler = scheduler if scheduler is not None else SchedScheduler()
        self._state = TimerState.IDLE
        self._on_stop: Optional[Callable[[], None]] = None
        self._tick_callbacks: List[Callable[[int], None]] = []

    # ----- properties -----
    @property
    def running(self) -> bool:
        """return whether a countdown is scheduled"""
        return self._state is TimerState.RUNNING

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def remaining(self) -> int:
        """return remaining seconds (>=0)"""
        return max(0, self._duration)

    @property
    def granularity(self) -> int:
        return self._granularity

    @property
    def time_format(self) -> TimeFormat:
        return self._time_format

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    def format(self, seconds: Optional[int] = None) -> str:
        """format seconds (default: remaining) in the same shape as the input duration"""
        if seconds is None:
            seconds = self.remaining
        return time_format.format(seconds, self._time_format)

    # ----- outer controls -----
    def on_tick(self, callback: Callable[[int], None]) -> "CountdownTimer":
        """add a tick callback; non-callables are ignored"""
        if callable(callback):
            self._tick_callbacks.append(callback)
        else:
            logger.debug("on_tick ignored non-callable %r", callback)
        return self

    def on_stop(self, callback: Optional[Callable[[], None]]) -> "CountdownTimer":
        """set (replace) the stop callback; None clears it"""
        if callback is None or callable(callback):
            self._on_stop = callback
        else:
            logger.debug("on_stop ignored non-callable %r", callback)
        return self

    def start(self) -> None:
        """start the countdown; the first tick happens right away"""
        if self._state is TimerState.RUNNING:
            return
        if self._state is TimerState.STOPPED:
            logger.warning("start() on a finished timer is ignored, create a new one")
            return
        self._state = TimerState.RUNNING
        logger.debug("countdown started: %s every %d ms", self.format(), self._granularity)
        self._cycle()

    # ----- internal methods -----
    def _cycle(self) -> None:
        """one tick: report and reschedule, or stop"""
        diff = self._duration
        self._duration -= 1

        if diff > 0:
            self._scheduler.after(self._granularity, self._cycle)
            logger.debug("tick %d", diff)
            for callback in self._tick_callbacks:
                callback(diff)
            return

        # state is cleared before on_stop runs
        self._state = TimerState.STOPPED
        logger.info("countdown finished")
        if self._on_stop is not None:
            self._on_stop()

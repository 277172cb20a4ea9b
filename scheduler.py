# scheduler.py
from __future__ import annotations
import sched
import time
from typing import Callable, Protocol


class Scheduler(Protocol):
    """
    anything that can run a callback after N milliseconds
    a Tk root (tk.Tk().after) already fits
    """
    def after(self, ms: int, func: Callable[[], None]) -> object: ...


class SchedScheduler:
    """
    single-threaded scheduler on top of the stdlib sched module
    after() only queues; run() blocks until the queue is empty
    """
    def __init__(self,
                 timefunc: Callable[[], float] = time.monotonic,
                 delayfunc: Callable[[float], None] = time.sleep):
        self._sched = sched.scheduler(timefunc, delayfunc)

    def after(self, ms: int, func: Callable[[], None]) -> None:
        """queue func to run ms milliseconds from now"""
        self._sched.enter(ms / 1000.0, 0, func)

    def run(self) -> None:
        """run queued callbacks (and whatever they queue) until none remain"""
        self._sched.run()

    @property
    def empty(self) -> bool:
        return self._sched.empty()

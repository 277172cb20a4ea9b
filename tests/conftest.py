import heapq
import itertools
from typing import Callable, List, Tuple

import pytest

import storage


class ManualScheduler:
    """
    virtual clock in milliseconds, advanced by hand
    callbacks due at the same time run in the order they were queued
    """
    def __init__(self):
        self.now: int = 0 # current virtual time in ms
        self._queue: List[Tuple[int, int, Callable[[], None]]] = []
        self._seq = itertools.count()

    def after(self, ms: int, func: Callable[[], None]) -> None:
        heapq.heappush(self._queue, (self.now + int(ms), next(self._seq), func))

    @property
    def pending(self) -> int:
        """number of callbacks still queued"""
        return len(self._queue)

    def advance(self, ms: int) -> int:
        """
        move the clock forward by ms, running every callback that falls due
        return how many callbacks ran
        """
        target = self.now + int(ms)
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, func = heapq.heappop(self._queue)
            self.now = due
            func()
            ran += 1
        self.now = target
        return ran

    def run_all(self, limit: int = 100_000) -> int:
        """run until the queue is empty; limit guards against endless rescheduling"""
        ran = 0
        while self._queue:
            if ran >= limit:
                raise RuntimeError(f"scheduler still busy after {limit} callbacks")
            due, _, func = heapq.heappop(self._queue)
            self.now = due
            func()
            ran += 1
        return ran


@pytest.fixture
def clock() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """point storage at a temporary data directory"""
    monkeypatch.setattr(storage, "DATA_DIR", tmp_path)
    monkeypatch.setattr(storage, "CONFIG_PATH", tmp_path / "config.json")
    return tmp_path

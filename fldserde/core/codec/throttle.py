from __future__ import annotations

from threading import Lock
from typing import Tuple


class ThrottledCounter:
    """
    Monotonic counter that signals when an occurrence should be reported.

    Reports fire on the 1st, 10th, 100th, ... occurrence so sustained bad
    input produces a logarithmic number of log lines.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._lock = Lock()
        self._count = 0
        self._next_report = 1

    def increment(self) -> Tuple[int, bool]:
        with self._lock:
            self._count += 1
            if self._count >= self._next_report:
                self._next_report *= 10
                return self._count, True
            return self._count, False

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    @property
    def next_report(self) -> int:
        with self._lock:
            return self._next_report

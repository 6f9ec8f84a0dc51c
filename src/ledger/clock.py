"""Clock — внешний источник времени (unix, секунды).

Mint deadline сравнивается с now() в момент вызова; таймеров нет.
"""

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Monotonic time source."""

    def now(self) -> int:
        """Current unix time in seconds."""


class SystemClock:
    """Системное время."""

    def now(self) -> int:
        return int(time.time())


class ManualClock:
    """Управляемое время для тестов и симуляций.

    Время только растёт: advance() с отрицательным шагом отклоняется.
    """

    def __init__(self, start: int = 1_700_000_000):
        if start < 0:
            raise ValueError(f"start cannot be negative: {start}")
        self._now = start

    def now(self) -> int:
        return self._now

    def advance(self, seconds: int) -> int:
        if seconds < 0:
            raise ValueError(f"Clock cannot go backwards: {seconds}")
        self._now += seconds
        return self._now

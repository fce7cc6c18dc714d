"""Clock-based id generator."""

import time
from typing import Callable, Iterable


def _millis() -> int:
    return time.time_ns() // 1_000_000


class MonotonicIdGenerator:
    """
    Ids taken from the wall clock in milliseconds, strictly increasing.

    Implements IdGenerator protocol. When two ids are requested within the
    same tick (or the clock steps backwards) the previous id plus one is
    used instead, so ids stay unique for the generator's lifetime.
    """

    def __init__(self, clock: Callable[[], int] = _millis):
        self._clock = clock
        self._last = 0

    def next_id(self) -> int:
        self._last = max(self._clock(), self._last + 1)
        return self._last

    def reserve(self, ids: Iterable[int]) -> None:
        for i in ids:
            if isinstance(i, int) and i > self._last:
                self._last = i

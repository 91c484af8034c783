# products_api/idgen.py
import random
import threading
from typing import Callable, Optional

from .config import Settings

IdGenerator = Callable[[], int]


class RandomIdGenerator:
    """Draws ids uniformly from ``[low, high)``."""

    def __init__(self, low: int, high: int, rng: Optional[random.Random] = None):
        if low >= high:
            raise ValueError("low must be less than high")
        self.low = low
        self.high = high
        self._rng = rng or random.Random()

    def __call__(self) -> int:
        return self._rng.randrange(self.low, self.high)


class CounterIdGenerator:
    """Hands out ``start, start + 1, ...``; safe to share between threads."""

    def __init__(self, start: int):
        self._next = start
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value


def make_id_generator(settings: Settings) -> IdGenerator:
    if settings.id_strategy == "counter":
        return CounterIdGenerator(settings.created_id_min)
    return RandomIdGenerator(settings.created_id_min, settings.created_id_max)

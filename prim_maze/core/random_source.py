import itertools
import random
from typing import Iterable, List, Protocol


class RandomSource(Protocol):
    """Anything that hands out uniform integers in [0, stop). random.Random qualifies."""

    def randrange(self, stop: int) -> int:
        ...


class SeededRandomSource(random.Random):
    """
    A private random stream. seed=None pulls entropy from the OS, so nothing
    depends on process-wide state or the wall clock.
    """


class ScriptedRandomSource:
    """
    Replays a fixed sequence of integers. Each value is reduced modulo the
    requested bound, and every bound asked for is recorded in 'calls' so
    tests can check the exact draw order.
    """

    def __init__(self, values: Iterable[int], cycle: bool = True):
        self.values = list(values)
        if not self.values:
            raise ValueError("ScriptedRandomSource needs at least one value")
        self._stream = itertools.cycle(self.values) if cycle else iter(self.values)
        self.calls: List[int] = []

    def randrange(self, stop: int) -> int:
        if stop <= 0:
            raise ValueError(f"empty range for randrange({stop})")
        try:
            value = next(self._stream)
        except StopIteration:
            raise RuntimeError(f"Scripted random stream exhausted after {len(self.calls)} draws") from None
        self.calls.append(stop)
        return value % stop

from abc import ABC, abstractmethod
from typing import Iterator, Optional
from prim_maze.core.grid import Grid
from prim_maze.core.random_source import RandomSource, SeededRandomSource

class Generator(ABC):
    def __init__(self, grid: Grid, seed: Optional[int] = None, rng: Optional[RandomSource] = None):
        self.grid = grid
        self.seed = seed
        # An explicit source wins; otherwise build a private stream from the seed
        self.rng = rng if rng is not None else SeededRandomSource(seed)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
        return self

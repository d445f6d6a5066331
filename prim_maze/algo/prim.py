import logging
from typing import Iterator, List, Optional, Set
from prim_maze.core.grid import Cell, Grid, Position
from prim_maze.core.random_source import RandomSource
from prim_maze.algo.base import Generator

logger = logging.getLogger(__name__)

class PrimsAlgorithm(Generator):
    """
    Randomized Prim's algorithm on a wall grid.

    Passages live on a lattice of cells spaced two apart. A frontier cell is a
    wall two steps away from the carved network; processing it turns it into
    a path and knocks out the single connector cell between it and one
    random carved neighbour, so the passages always form a tree.
    """
    PROGRESS_INTERVAL = 100

    def __init__(self, grid: Grid, seed: Optional[int] = None, rng: Optional[RandomSource] = None):
        super().__init__(grid, seed=seed, rng=rng)
        self.start: Optional[Position] = None
        self.connector_count = 0
        self.frontier_added = 0
        self.max_frontier = 0

    def run(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng

        # Row first, then column: the draw order is part of reproducibility
        start_row = rng.randrange(grid.height)
        start_col = rng.randrange(grid.width)
        self.start = Position(start_row, start_col)
        grid.set_cell(self.start, Cell.PATH)
        logger.debug("Prim start at %s on %dx%d grid", tuple(self.start), grid.width, grid.height)

        # The list keeps draw order stable, the set gives O(1) membership
        frontier: List[Position] = grid.frontier_cells_matching(self.start, Cell.WALL)
        in_frontier: Set[Position] = set(frontier)
        self.frontier_added = len(frontier)
        self.max_frontier = len(frontier)

        while frontier:
            idx = rng.randrange(len(frontier))
            current = frontier[idx]
            grid.set_cell(current, Cell.PATH)

            # Join the new cell to the network through one random carved neighbour
            neighbours = grid.frontier_cells_matching(current, Cell.PATH)
            if neighbours:
                neighbour = neighbours[rng.randrange(len(neighbours))]
                grid.set_cell(grid.position_between(neighbour, current), Cell.PATH)
                self.connector_count += 1

            new_frontier = [
                pos for pos in grid.frontier_cells_matching(current, Cell.WALL)
                if pos not in in_frontier
            ]

            del frontier[idx]
            in_frontier.discard(current)
            frontier.extend(new_frontier)
            in_frontier.update(new_frontier)

            self.frontier_added += len(new_frontier)
            self.max_frontier = max(self.max_frontier, len(frontier))
            self.step_count += 1

            if self.step_count % self.PROGRESS_INTERVAL == 0:
                yield f"Frontier: {len(frontier)}"

        logger.debug(
            "Prim done: %d frontier cells processed, %d connectors carved",
            self.step_count, self.connector_count
        )
        yield "Done"


def generate_maze(grid: Grid, seed: Optional[int] = None, rng: Optional[RandomSource] = None) -> PrimsAlgorithm:
    """Carves a maze into 'grid' in place and returns the finished generator."""
    return PrimsAlgorithm(grid, seed=seed, rng=rng).run_all()

from collections import deque
from typing import Dict, Optional, Set
import numpy as np
from prim_maze.core.grid import Cell, Grid, Position

class MazeAnalyzer:
    @staticmethod
    def to_numpy(grid: Grid) -> np.ndarray:
        """(height, width) uint8 view of the cell buffer, row-major."""
        return np.frombuffer(grid.cells.tobytes(), dtype=np.uint8).reshape(grid.height, grid.width)

    @staticmethod
    def neighbour_counts(grid: Grid) -> np.ndarray:
        """
        For every cell, the number of 4-adjacent PATH cells.
        Computed by summing the path mask shifted in each direction.
        """
        mask = (MazeAnalyzer.to_numpy(grid) == Cell.PATH).astype(np.int32)
        padded = np.pad(mask, 1)
        return (
            padded[:-2, 1:-1] +  # above
            padded[2:, 1:-1] +   # below
            padded[1:-1, :-2] +  # left
            padded[1:-1, 2:]     # right
        )

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, int]:
        is_path = MazeAnalyzer.to_numpy(grid) == Cell.PATH
        degrees = MazeAnalyzer.neighbour_counts(grid)[is_path]

        path_cells = int(is_path.sum())
        return {
            "path_cells": path_cells,
            "wall_cells": grid.width * grid.height - path_cells,
            "dead_ends": int((degrees == 1).sum()),
            "corridors": int((degrees == 2).sum()),
            "junctions": int((degrees >= 3).sum()),
            # Each adjacency is counted once from each side
            "edges": int(degrees.sum()) // 2,
        }

    @staticmethod
    def reachable_from(grid: Grid, start: Position) -> Set[Position]:
        """BFS over PATH cells using 4-adjacency. Empty if 'start' is a wall."""
        if grid.get_cell(start) != Cell.PATH:
            return set()

        seen = {start}
        queue = deque([start])
        while queue:
            row, col = queue.popleft()
            for nxt in (Position(row, col - 1), Position(row, col + 1),
                        Position(row - 1, col), Position(row + 1, col)):
                if nxt not in seen and grid.is_position_in_grid(nxt) and grid.get_cell(nxt) == Cell.PATH:
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

    @staticmethod
    def is_connected(grid: Grid, start: Optional[Position] = None) -> bool:
        path_cells = grid.count(Cell.PATH)
        if path_cells == 0:
            return False
        if start is None:
            start = next(grid.positions(Cell.PATH))
        return len(MazeAnalyzer.reachable_from(grid, start)) == path_cells

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """A perfect maze is one connected tree: n cells joined by n - 1 edges."""
        stats = MazeAnalyzer.calculate_stats(grid)
        return MazeAnalyzer.is_connected(grid) and stats["edges"] == stats["path_cells"] - 1

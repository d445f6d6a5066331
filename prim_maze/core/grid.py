import operator
from array import array
from enum import IntEnum
from typing import Iterator, List, NamedTuple


class Cell(IntEnum):
    WALL = 0
    PATH = 1


class Position(NamedTuple):
    row: int
    col: int


class Grid:
    # Frontier cells sit two steps away; the cell in between is the connector.
    STEP = 2

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if isinstance(width, bool) or isinstance(height, bool):
            raise ValueError(f"Grid dimensions must be integers, got {width!r}x{height!r}")
        try:
            width, height = operator.index(width), operator.index(height)
        except TypeError:
            raise ValueError(f"Grid dimensions must be integers, got {width!r}x{height!r}") from None
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        # 'B' (unsigned char) -> 1 byte per cell, everything starts as wall
        self.cells = array('B', [Cell.WALL] * (width * height))

    def is_position_in_grid(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.height and 0 <= col < self.width

    def get_index(self, pos: Position) -> int:
        row, col = pos
        if 0 <= row < self.height and 0 <= col < self.width:
            return row * self.width + col
        raise IndexError(f"Position ({row}, {col}) out of bounds for {self.height}x{self.width} grid")

    def get_cell(self, pos: Position) -> Cell:
        return Cell(self.cells[self.get_index(pos)])

    def set_cell(self, pos: Position, cell: Cell):
        self.cells[self.get_index(pos)] = cell

    def frontier_cells_matching(self, pos: Position, cell: Cell) -> List[Position]:
        """
        Returns the positions two steps away from 'pos' (left, right, top, bottom,
        in that order) that are inside the grid and currently hold 'cell'.
        The order matters for reproducibility under a fixed random stream.
        """
        row, col = pos
        candidates = (
            Position(row, col - self.STEP),  # left
            Position(row, col + self.STEP),  # right
            Position(row - self.STEP, col),  # top
            Position(row + self.STEP, col),  # bottom
        )
        return [
            candidate for candidate in candidates
            if self.is_position_in_grid(candidate) and self.cells[self.get_index(candidate)] == cell
        ]

    def position_between(self, frontier_pos: Position, cell_pos: Position) -> Position:
        """
        Returns the connector cell lying between two positions that are exactly
        two steps apart along a single axis.
        """
        d_row = frontier_pos.row - cell_pos.row
        d_col = frontier_pos.col - cell_pos.col

        if abs(d_row) == self.STEP and d_col == 0:
            return Position(cell_pos.row + d_row // 2, cell_pos.col)
        if abs(d_col) == self.STEP and d_row == 0:
            return Position(cell_pos.row, cell_pos.col + d_col // 2)

        raise ValueError(
            f"No single connector between {tuple(frontier_pos)} and {tuple(cell_pos)}: "
            f"positions must be {self.STEP} apart along one axis"
        )

    def rows(self) -> Iterator[List[Cell]]:
        """Yields each row, top to bottom, as a list of cells."""
        for row in range(self.height):
            start = row * self.width
            yield [Cell(v) for v in self.cells[start:start + self.width]]

    def positions(self, cell: Cell) -> Iterator[Position]:
        for idx, val in enumerate(self.cells):
            if val == cell:
                yield Position(idx // self.width, idx % self.width)

    def count(self, cell: Cell) -> int:
        return self.cells.count(cell)

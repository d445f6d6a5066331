import sys
from typing import List, Optional, TextIO
from prim_maze.core.grid import Cell, Grid

class TextRenderer:
    WALL_GLYPH = "█"
    PATH_GLYPH = " "

    def __init__(self, wall_glyph: Optional[str] = None, path_glyph: Optional[str] = None):
        self.glyphs = {
            Cell.WALL: wall_glyph if wall_glyph is not None else self.WALL_GLYPH,
            Cell.PATH: path_glyph if path_glyph is not None else self.PATH_GLYPH,
        }

    def render_lines(self, grid: Grid) -> List[str]:
        """One string per row, top to bottom, columns left to right."""
        return ["".join(self.glyphs[cell] for cell in row) for row in grid.rows()]

    def render(self, grid: Grid) -> str:
        return "\n".join(self.render_lines(grid))

    def print(self, grid: Grid, stream: Optional[TextIO] = None):
        stream = stream if stream is not None else sys.stdout
        for line in self.render_lines(grid):
            stream.write(line + "\n")
        stream.flush()

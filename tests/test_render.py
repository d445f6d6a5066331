import io
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from prim_maze.core.grid import Cell, Grid, Position
from prim_maze.core.random_source import ScriptedRandomSource
from prim_maze.algo.prim import generate_maze
from prim_maze.viz.text_renderer import TextRenderer

class TestTextRenderer(unittest.TestCase):
    def test_all_walls(self):
        grid = Grid(4, 2)
        self.assertEqual(TextRenderer().render(grid), "████\n████")

    def test_hand_traced_3x3(self):
        grid = Grid(3, 3)
        generate_maze(grid, rng=ScriptedRandomSource([0]))
        self.assertEqual(TextRenderer().render_lines(grid), ["   ", " ██", "   "])

    def test_custom_glyphs(self):
        grid = Grid(3, 1)
        grid.set_cell(Position(0, 1), Cell.PATH)
        self.assertEqual(TextRenderer(wall_glyph="#", path_glyph=".").render(grid), "#.#")

    def test_print_to_stream(self):
        grid = Grid(30, 20)
        generate_maze(grid, seed=1)
        out = io.StringIO()
        TextRenderer().print(grid, stream=out)

        lines = out.getvalue().split("\n")
        self.assertEqual(lines[-1], "")  # trailing newline
        self.assertEqual(len(lines[:-1]), 20)
        for line in lines[:-1]:
            self.assertEqual(len(line), 30)
            self.assertTrue(set(line) <= {"█", " "})

if __name__ == '__main__':
    unittest.main()

import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from prim_maze.core.random_source import ScriptedRandomSource, SeededRandomSource

class TestScriptedRandomSource(unittest.TestCase):
    def test_values_reduced_modulo_stop(self):
        rng = ScriptedRandomSource([7, 3, 10])
        self.assertEqual(rng.randrange(4), 3)   # 7 % 4
        self.assertEqual(rng.randrange(5), 3)   # 3 % 5
        self.assertEqual(rng.randrange(10), 0)  # 10 % 10
        self.assertEqual(rng.calls, [4, 5, 10])

    def test_cycles_by_default(self):
        rng = ScriptedRandomSource([1, 2])
        draws = [rng.randrange(100) for _ in range(5)]
        self.assertEqual(draws, [1, 2, 1, 2, 1])

    def test_exhausted_script_raises(self):
        rng = ScriptedRandomSource([4, 5], cycle=False)
        self.assertEqual(rng.randrange(10), 4)
        self.assertEqual(rng.randrange(10), 5)
        with self.assertRaises(RuntimeError):
            rng.randrange(10)
        # The failed draw is not recorded
        self.assertEqual(rng.calls, [10, 10])

    def test_empty_values_rejected(self):
        with self.assertRaises(ValueError):
            ScriptedRandomSource([])
        with self.assertRaises(ValueError):
            ScriptedRandomSource(iter(()), cycle=False)

    def test_empty_range_does_not_consume(self):
        rng = ScriptedRandomSource([6, 8], cycle=False)
        with self.assertRaises(ValueError):
            rng.randrange(0)
        with self.assertRaises(ValueError):
            rng.randrange(-2)
        self.assertEqual(rng.calls, [])
        # First value is still the next one handed out
        self.assertEqual(rng.randrange(100), 6)

class TestSeededRandomSource(unittest.TestCase):
    def test_same_seed_same_stream(self):
        a = SeededRandomSource(2024)
        b = SeededRandomSource(2024)
        self.assertEqual([a.randrange(1000) for _ in range(20)],
                         [b.randrange(1000) for _ in range(20)])

    def test_draws_in_range(self):
        rng = SeededRandomSource(1)
        for stop in (1, 2, 3, 17):
            for _ in range(50):
                self.assertTrue(0 <= rng.randrange(stop) < stop)

if __name__ == '__main__':
    unittest.main()

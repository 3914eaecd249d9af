"""
Set of tests for random tile placement.
"""

from unittest import TestCase, main

import numpy as np
from numpy.random import default_rng

from play2048.core.spawner import TILE_SPAWN_PROBS, seed_board, spawn_tile


class ScriptedRandom:
    """Replay fixed draws: ``integers`` returns ``cells`` in order, ``random`` returns ``uniforms``."""

    def __init__(self, cells, uniforms):
        self.cells = list(cells)
        self.uniforms = list(uniforms)

    def integers(self, high):
        value = self.cells.pop(0)
        assert 0 <= value < high
        return value

    def random(self):
        return self.uniforms.pop(0)


class TestSpawnTile(TestCase):
    def test_full_board(self):
        """A full board is returned unchanged without a cell."""
        board = np.full((3, 3), 2)
        new_board, cell = spawn_tile(board, rng=default_rng(0))
        self.assertIsNone(cell)
        np.testing.assert_array_equal(new_board, board)

    def test_exactly_one_cell_changes(self):
        board = np.array([[2, 0, 0], [0, 4, 0], [0, 0, 8]])
        new_board, cell = spawn_tile(board, rng=default_rng(42))

        changed = np.argwhere(new_board != board)
        self.assertEqual(len(changed), 1)
        self.assertEqual(tuple(changed[0]), cell)
        self.assertIn(new_board[cell], TILE_SPAWN_PROBS)
        self.assertEqual(board[cell], 0)

    def test_input_unchanged(self):
        board = np.zeros((4, 4), dtype=np.int64)
        spawn_tile(board, rng=default_rng(1))
        self.assertFalse(board.any())

    def test_injected_draws(self):
        """The cell is picked among empty cells in row-major order, then the value."""
        board = np.array([[2, 0], [0, 0]])
        new_board, cell = spawn_tile(board, rng=ScriptedRandom(cells=[2], uniforms=[0.95]))
        self.assertEqual(cell, (1, 1))
        self.assertEqual(new_board[1, 1], 4)

        new_board, cell = spawn_tile(board, rng=ScriptedRandom(cells=[0], uniforms=[0.5]))
        self.assertEqual(cell, (0, 1))
        self.assertEqual(new_board[0, 1], 2)

    def test_seed_reproducibility(self):
        """Same seed produces the same tile."""
        board = np.zeros((4, 4), dtype=np.int64)
        first, first_cell = spawn_tile(board, rng=default_rng(7))
        second, second_cell = spawn_tile(board, rng=default_rng(7))
        self.assertEqual(first_cell, second_cell)
        np.testing.assert_array_equal(first, second)

    def test_value_distribution(self):
        """Roughly 90% of new tiles are 2."""
        rng = default_rng(123)
        board = np.zeros((4, 4), dtype=np.int64)
        values = [spawn_tile(board, rng=rng)[0].sum() for _ in range(2000)]
        ratio = values.count(2) / len(values)
        self.assertAlmostEqual(ratio, TILE_SPAWN_PROBS[2], delta=0.04)

    def test_cell_distribution(self):
        """Every empty cell can be picked."""
        rng = default_rng(5)
        board = np.zeros((2, 2), dtype=np.int64)
        cells = {spawn_tile(board, rng=rng)[1] for _ in range(200)}
        self.assertEqual(cells, {(0, 0), (0, 1), (1, 0), (1, 1)})


class TestSeedBoard(TestCase):
    def test_two_tiles(self):
        board, cells = seed_board(4, rng=default_rng(42))
        self.assertEqual(np.count_nonzero(board), 2)
        self.assertEqual(len(set(cells)), 2)
        self.assertTrue(np.all(np.isin(board[board != 0], [2, 4])))

    def test_small_board(self):
        """Stops once the board is full."""
        board, cells = seed_board(1, rng=default_rng(0))
        self.assertEqual(len(cells), 1)
        self.assertEqual(np.count_nonzero(board), 1)


if __name__ == '__main__':
    main()

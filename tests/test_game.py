"""
Tests for the game state machine.

Tests cover the initial game, the move transition, the won and lost terminal statuses and the
values exposed to the user interface.
"""

from unittest import TestCase, main

import numpy as np

from tilemerge.core.board import Board
from tilemerge.core.coordinates import Direction, Position
from tilemerge.envs.game import GameState, GameStatus, new_game


def checkerboard(low=8, high=16):
    """Full board where no two neighbours hold the same value."""
    return Board.from_rows([[low if (row + column) % 2 else high for column in range(6)] for row in range(6)])


class TestNewGame(TestCase):
    def test_one_initial_tile(self):
        """A new game holds exactly one tile of value 1."""
        game = new_game()
        obs = game.observation

        self.assertEqual(obs.shape, (6, 6))
        self.assertEqual(np.count_nonzero(obs), 1)
        self.assertEqual(obs.sum(), 1)
        self.assertEqual(game.status, GameStatus.PLAYING)
        self.assertFalse(game.won)
        self.assertFalse(game.is_dead)

    def test_seed_reproducibility(self):
        np.testing.assert_array_equal(new_game(seed=42).observation, new_game(seed=42).observation)


class TestApplyMove(TestCase):
    def test_slide_then_spawn(self):
        """A lone tile slides to the far edge and a new tile appears elsewhere."""
        board = Board()
        board.set((0, 0), 1)
        game = GameState(board, rng=np.random.default_rng(1))

        self.assertTrue(game.apply_move(Direction.RIGHT))

        obs = game.observation
        self.assertEqual(game.cell_value(Position(0, 5)), 1)
        self.assertEqual(np.count_nonzero(obs), 2)
        self.assertEqual(obs.sum(), 2)
        self.assertEqual(game.status, GameStatus.PLAYING)

    def test_spawn_even_without_movement(self):
        """A move that changes nothing still spawns a tile."""
        board = Board()
        board.set((0, 0), 4)
        game = GameState(board)

        self.assertTrue(game.apply_move(Direction.LEFT))

        self.assertEqual(game.cell_value((0, 0)), 4)
        self.assertEqual(np.count_nonzero(game.observation), 2)

    def test_merge_then_spawn(self):
        board = Board.from_rows([[2, 2, 2, 2, 0, 0]] + [[0] * 6 for _ in range(5)])
        game = GameState(board)
        game.apply_move(Direction.LEFT)

        self.assertEqual(game.cell_value((0, 0)), 4)
        self.assertEqual(game.cell_value((0, 1)), 4)
        self.assertEqual(game.observation.sum(), 9)


class TestWin(TestCase):
    def test_win_stops_before_spawn(self):
        """Reaching 2048 wins the game and skips the spawn."""
        board = Board()
        board.set((0, 0), 1024)
        board.set((0, 3), 1024)
        game = GameState(board)

        with self.assertLogs('tilemerge.envs.game', level='INFO'):
            self.assertTrue(game.apply_move(Direction.LEFT))

        self.assertEqual(game.status, GameStatus.WON)
        self.assertTrue(game.won)
        self.assertEqual(game.cell_value((0, 0)), 2048)
        self.assertEqual(np.count_nonzero(game.observation), 1)

    def test_win_skips_loss_check(self):
        """A winning move on a blocked board wins without checking for a loss."""
        board = checkerboard()
        board.set((0, 0), 2048)
        before = board.to_array()
        game = GameState(board)

        self.assertTrue(game.apply_move(Direction.LEFT))

        self.assertEqual(game.status, GameStatus.WON)
        self.assertFalse(game.is_dead)
        np.testing.assert_array_equal(game.observation, before)

    def test_existing_win_tile(self):
        board = Board()
        board.set((2, 2), 2048)
        game = GameState(board)
        game.apply_move(Direction.UP)

        self.assertEqual(game.status, GameStatus.WON)
        self.assertEqual(np.count_nonzero(game.observation), 1)

    def test_moves_after_win_are_ignored(self):
        board = Board()
        board.set((0, 0), 2048)
        game = GameState(board)
        game.apply_move(Direction.DOWN)
        before = game.observation

        self.assertFalse(game.apply_move(Direction.UP))
        np.testing.assert_array_equal(game.observation, before)
        self.assertEqual(game.status, GameStatus.WON)


class TestLoss(TestCase):
    def test_last_spawn_loses(self):
        """Filling the last empty cell with no possible merge loses the game."""
        board = checkerboard()
        board.set((5, 5), 0)
        game = GameState(board)

        self.assertTrue(game.apply_move(Direction.UP))

        self.assertEqual(game.cell_value((5, 5)), 1)
        self.assertEqual(game.status, GameStatus.LOST)
        self.assertTrue(game.is_dead)
        self.assertTrue(game.is_finished)

    def test_moves_after_loss_are_ignored(self):
        board = checkerboard()
        board.set((5, 5), 0)
        game = GameState(board)
        game.apply_move(Direction.UP)
        before = game.observation

        for direction in Direction:
            self.assertFalse(game.apply_move(direction))
        np.testing.assert_array_equal(game.observation, before)
        self.assertEqual(game.status, GameStatus.LOST)


class TestDisplay(TestCase):
    def test_cell_text(self):
        board = Board()
        board.set((1, 1), 16)
        game = GameState(board)
        self.assertEqual(game.cell_text((1, 1)), '16')
        self.assertEqual(game.cell_text((0, 0)), '')

    def test_status_message(self):
        game = GameState()
        self.assertIn('E/S/D/F', game.status_message)
        game.won = True
        self.assertEqual(game.status_message, GameState.MESSAGES[GameStatus.WON])
        self.assertIn('backspace', game.status_message)

    def test_cell_value_out_of_range(self):
        with self.assertRaises(IndexError):
            GameState().cell_value((6, 6))


if __name__ == '__main__':
    main()

"""State machine driving a game of the 6x6 tile merge puzzle."""

import logging
from enum import Enum
from typing import Optional

from numpy import ndarray
from numpy.random import Generator, default_rng

from tilemerge.core.board import Board, Cell
from tilemerge.core.coordinates import Direction
from tilemerge.core.merge import slide_and_merge
from tilemerge.core.spawner import spawn_tile
from tilemerge.core.terminal import is_lost, is_won

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """Status of a game. Won and Lost are terminal."""

    PLAYING = 'playing'
    WON = 'won'
    LOST = 'lost'


class GameState:
    """
    A game in progress.

    The state owns its board and mutates it only while applying a move. Once the game is won or lost
    the board never changes again.
    """

    # ##: Status lines shown by the user interface.
    MESSAGES = {
        GameStatus.PLAYING: 'Use E/S/D/F to move the tiles.',
        GameStatus.WON: 'You reached 2048! Press backspace to play again.',
        GameStatus.LOST: 'No more moves. Press backspace to play again.',
    }

    def __init__(self, board: Optional[Board] = None, rng: Optional[Generator] = None):
        """
        Initialize the game state.

        Parameters
        ----------
        board : Board, optional
            Board to play on, empty when omitted. No tile is spawned here, see ``new_game``.
        rng : Generator, optional
            Generator for reproducible spawns, the cryptographic source is used when omitted.
        """
        self._board = board if board is not None else Board()
        self._rng = rng
        self.won = False
        self.is_dead = False

    @property
    def status(self) -> GameStatus:
        """Current status of the game."""
        if self.won:
            return GameStatus.WON
        if self.is_dead:
            return GameStatus.LOST
        return GameStatus.PLAYING

    @property
    def is_finished(self) -> bool:
        """Check if the game reached a terminal status."""
        return self.won or self.is_dead

    @property
    def status_message(self) -> str:
        """Status line for the current status."""
        return self.MESSAGES[self.status]

    @property
    def observation(self) -> ndarray:
        """Copy of the board as a 6x6 array."""
        return self._board.to_array()

    def cell_value(self, position: Cell) -> int:
        """Get the value of a cell, 0 for an empty one."""
        return self._board.get(position)

    def cell_text(self, position: Cell) -> str:
        """Get the text displayed in a cell, empty for an empty one."""
        value = self._board.get(position)
        return str(value) if value != 0 else ''

    def spawn(self):
        """Put a new tile in a random empty cell."""
        return spawn_tile(self._board, self._rng)

    def apply_move(self, direction: Direction) -> bool:
        """
        Apply a move to the game.

        Parameters
        ----------
        direction : Direction
            Direction the tiles are pushed towards.

        Returns
        -------
        bool
            True if the state was processed and must be drawn again, False if the game was already over.

        Notes
        -----
        - The merge pass and the spawn always run, even when the move slides and merges nothing.
        - A win stops the move before the spawn and the loss check.
        """
        if self.is_finished:
            _logger.debug('Game over, ignoring move %s', direction.value)
            return False

        slide_and_merge(self._board, direction)

        if is_won(self._board):
            self.won = True
            _logger.info('Game won with tile %d', self._board.max_tile())
            return True

        position = self.spawn()
        _logger.debug('Moved %s, spawned at %s', direction.value, position)

        if is_lost(self._board):
            self.is_dead = True
            _logger.info('Game lost, best tile %d', self._board.max_tile())
        return True

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._board.to_array().tolist():
            print(' \t'.join(map(str, row)))


def new_game(seed: Optional[int] = None) -> GameState:
    """
    Start a new game: an empty board with one spawned tile.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible spawns. Spawns use the cryptographic source when omitted.

    Returns
    -------
    GameState
        The new game.
    """
    rng = default_rng(seed) if seed is not None else None
    game = GameState(rng=rng)
    game.spawn()
    _logger.info('Created new game')
    return game

"""
Detection of the end of a game.
"""

from tilemerge.addons.config import WIN_TILE
from tilemerge.core.board import Board
from tilemerge.core.coordinates import Direction, all_positions, neighbor


def is_won(board: Board, target: int = WIN_TILE) -> bool:
    """Check whether any tile reached the winning value."""
    return board.max_tile() >= target


def is_lost(board: Board) -> bool:
    """
    Check whether no move can change the board anymore.

    Parameters
    ----------
    board : Board
        The board to check.

    Returns
    -------
    bool
        True if no cell is empty and no cell has a neighbour holding the same value.
    """
    for position in all_positions():
        if board.is_empty(position):
            return False
        for direction in Direction:
            other = neighbor(position, direction)
            if other is not None and board.is_mergeable(position, other):
                return False
    return True

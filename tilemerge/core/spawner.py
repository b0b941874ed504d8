"""
Placement of new tiles on the board.
"""

import secrets
from typing import Optional

from numpy.random import Generator

from tilemerge.addons.config import SPAWN_TILE
from tilemerge.core.board import Board
from tilemerge.core.coordinates import Position


def draw_index(count: int, rng: Optional[Generator] = None) -> int:
    """
    Draw an index uniformly in ``[0, count)``.

    Parameters
    ----------
    count : int
        Number of candidates. Must be > 0.
    rng : Generator, optional
        Generator for reproducible draws. The operating system's cryptographic source is used when omitted.

    Returns
    -------
    int
        The drawn index.

    Raises
    ------
    ValueError
        If count <= 0.
    """
    if count <= 0:
        raise ValueError(f'count must be > 0, got {count}')
    if rng is None:
        return secrets.randbelow(count)
    return int(rng.integers(count))


def spawn_tile(board: Board, rng: Optional[Generator] = None) -> Optional[Position]:
    """
    Put a new tile of value 1 in a random empty cell.

    Parameters
    ----------
    board : Board
        The board, **modified in-place.**
    rng : Generator, optional
        Generator for reproducible placement.

    Returns
    -------
    Position or None
        The cell that received the tile, or None if the board is full.

    Notes
    -----
    Empty cells are sorted before the draw, so the choice never depends on how they were collected.
    """
    empty_cells = sorted(board.empty_positions())
    if not empty_cells:
        return None

    position = empty_cells[draw_index(len(empty_cells), rng)]
    board.set(position, SPAWN_TILE)
    return position

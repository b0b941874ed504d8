"""
Cell addresses and movement directions of the game board.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tilemerge.addons.config import BOARD_SIZE


class Direction(str, Enum):
    """The four directions a move can push the tiles towards."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    def opposite(self) -> 'Direction':
        """Return the direction pointing the other way."""
        return _OPPOSITE[self]

    def perpendicular_positive(self) -> 'Direction':
        """
        Rotate the direction one step along the cycle Up, Left, Down, Right.

        Returns
        -------
        Direction
            The rotated direction.

        Notes
        -----
        Only used to walk along the edge of the board when collecting the heads of the lines.
        """
        return _PERPENDICULAR[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_PERPENDICULAR = {
    Direction.UP: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
    Direction.DOWN: Direction.RIGHT,
    Direction.RIGHT: Direction.UP,
}

# ##: Row and column offsets for one step in each direction.
_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True, order=True)
class Position:
    """
    Address of one cell of the board.

    Raises
    ------
    IndexError
        If the row or the column lies outside the board.
    """

    row: int
    column: int

    def __post_init__(self):
        if not (0 <= self.row < BOARD_SIZE and 0 <= self.column < BOARD_SIZE):
            raise IndexError(f'Position out of board: ({self.row}, {self.column})')

    @classmethod
    def from_index(cls, index: int) -> 'Position':
        """Build the position of a row-major flat index."""
        return cls(index // BOARD_SIZE, index % BOARD_SIZE)

    @property
    def index(self) -> int:
        """Row-major flat index of the cell."""
        return self.row * BOARD_SIZE + self.column


def neighbor(position: Position, direction: Direction) -> Optional[Position]:
    """
    Get the cell next to a position in a given direction.

    Parameters
    ----------
    position : Position
        The starting cell.
    direction : Direction
        The direction of the step.

    Returns
    -------
    Position or None
        The adjacent cell, or None when the position already lies on the edge in that direction.
    """
    row_offset, column_offset = _OFFSETS[direction]
    row, column = position.row + row_offset, position.column + column_offset
    if 0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE:
        return Position(row, column)
    return None


def all_positions() -> list[Position]:
    """All cells of the board, in row-major order."""
    return [Position.from_index(index) for index in range(BOARD_SIZE * BOARD_SIZE)]

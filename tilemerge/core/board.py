"""
Storage of the 36 cells of the game board.
"""

from typing import Iterable, Optional, Sequence, Set, Union

from numpy import argwhere, array, int64, ndarray, zeros

from tilemerge.addons.config import BOARD_SIZE
from tilemerge.core.coordinates import Position

Cell = Union[Position, tuple[int, int]]


class Board:
    """
    The 6x6 grid of tile values.

    A value of 0 marks an empty cell, any other value is a tile. Cells are addressed with a ``Position``
    or a plain ``(row, column)`` pair; both are bounds-checked.
    """

    def __init__(self, cells: Optional[ndarray] = None):
        """
        Initialize the board.

        Parameters
        ----------
        cells : ndarray, optional
            Initial 6x6 grid, copied. An empty board is created when omitted.
        """
        if cells is None:
            self._cells = zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64)
        else:
            self._cells = _checked_grid(cells)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> 'Board':
        """Build a board from six rows of six values."""
        return cls(array([list(row) for row in rows], dtype=int64))

    def get(self, position: Cell) -> int:
        """Get the value held by a cell."""
        return int(self._cells[_checked(position)])

    def set(self, position: Cell, value: int):
        """
        Store a value in a cell.

        Raises
        ------
        IndexError
            If the cell lies outside the board.
        ValueError
            If the value is negative.
        """
        if value < 0:
            raise ValueError(f'Tile values are unsigned, got {value}')
        self._cells[_checked(position)] = value

    def is_empty(self, position: Cell) -> bool:
        """Check whether a cell holds no tile."""
        return self.get(position) == 0

    def is_mergeable(self, first: Cell, second: Cell) -> bool:
        """
        Check whether two cells hold tiles that can merge.

        Returns
        -------
        bool
            True if both cells are non-empty and hold equal values.
        """
        value = self.get(first)
        return value != 0 and value == self.get(second)

    def empty_positions(self) -> Set[Position]:
        """Get every cell holding the value 0."""
        return {Position(int(row), int(column)) for row, column in argwhere(self._cells == 0)}

    def max_tile(self) -> int:
        """Get the largest value on the board."""
        return int(self._cells.max())

    def to_array(self) -> ndarray:
        """Get a copy of the grid as a 6x6 array."""
        return self._cells.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool((self._cells == other._cells).all())

    def __repr__(self) -> str:
        return f'Board({self._cells.tolist()})'


def _checked(position: Cell) -> tuple[int, int]:
    """Validate a cell address and turn it into a numpy index."""
    if isinstance(position, Position):
        return position.row, position.column
    row, column = position
    # ##: Reject negative indices explicitly, numpy would wrap them around.
    if not (0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE):
        raise IndexError(f'Position out of board: ({row}, {column})')
    return row, column


def _checked_grid(cells: ndarray) -> ndarray:
    """Validate the shape and values of an initial grid."""
    grid = array(cells, dtype=int64)
    if grid.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f'Board must be {BOARD_SIZE}x{BOARD_SIZE}, got shape {grid.shape}')
    if (grid < 0).any():
        raise ValueError('Tile values are unsigned')
    return grid

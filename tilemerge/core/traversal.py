"""
Traversal of the board lines used by a move.

A move in some direction works on six independent lines. Each line starts at its head, the cell
closest to the edge the tiles are pushed towards, and runs away from that edge.
"""

from typing import Iterator

from tilemerge.core.coordinates import Direction, Position, neighbor

# ##: Corner from which the heads of the lines are collected, for each move direction.
_HEAD_CORNERS = {
    Direction.UP: Position(0, 5),
    Direction.DOWN: Position(5, 0),
    Direction.LEFT: Position(0, 0),
    Direction.RIGHT: Position(5, 5),
}


def line(head: Position, step: Direction) -> Iterator[Position]:
    """
    Walk from a cell to the edge of the board.

    Parameters
    ----------
    head : Position
        First cell yielded.
    step : Direction
        Direction of each step.

    Yields
    ------
    Position
        The head first, then every following cell up to and including the one on the edge.
    """
    current = head
    while current is not None:
        yield current
        current = neighbor(current, step)


def line_heads(direction: Direction) -> list[Position]:
    """
    Get the heads of the six lines of a move.

    Parameters
    ----------
    direction : Direction
        Direction of the move.

    Returns
    -------
    list[Position]
        The cells of the edge row or column the move pushes towards.

    Notes
    -----
    Up yields the top row, Down the bottom row, Left the leftmost column and Right the rightmost column.
    The edge is walked from a corner along ``direction.perpendicular_positive()``.
    """
    return list(line(_HEAD_CORNERS[direction], direction.perpendicular_positive()))

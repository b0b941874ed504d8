"""
Slide and merge of the tiles for one move.
"""

from tilemerge.core.board import Board
from tilemerge.core.coordinates import Direction, Position, neighbor
from tilemerge.core.traversal import line, line_heads


def merge_line(board: Board, head: Position, direction: Direction):
    """
    Slide and merge the tiles of one line towards its head.

    Parameters
    ----------
    board : Board
        The board, **modified in-place.**
    head : Position
        The cell of the line closest to the edge the tiles are pushed towards.
    direction : Direction
        Direction of the move.

    Notes
    -----
    - The line is read once, from the head to the far edge, skipping empty cells.
    - A write cursor starts on the head. At most one value is staged on it, waiting for a possible merge.
    - A staged value equal to the next tile absorbs it and the cursor moves on; the merged tile does not
      merge again during this move.
    - A staged value different from the next tile stays put and the next tile is staged one cell further.
    - Every cell past the last written one is cleared.
    """
    step = direction.opposite()
    write = head
    pending = False

    for position in line(head, step):
        value = board.get(position)
        if value == 0:
            continue

        if not pending:
            board.set(write, value)
            pending = True
        elif board.is_mergeable(write, position):
            board.set(write, board.get(write) + value)
            write = neighbor(write, step)
            pending = False
        else:
            write = neighbor(write, step)
            board.set(write, value)

    # ##: Keep the last staged value, clear everything after it.
    if pending:
        write = neighbor(write, step)
    if write is not None:
        for position in line(write, step):
            board.set(position, 0)


def slide_and_merge(board: Board, direction: Direction):
    """
    Apply a move to the six lines of the board.

    Parameters
    ----------
    board : Board
        The board, **modified in-place.**
    direction : Direction
        Direction of the move.
    """
    for head in line_heads(direction):
        merge_line(board, head, direction)

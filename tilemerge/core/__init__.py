# -*- coding: utf-8 -*-
"""
Rules of the 6x6 tile merge game.

It includes the coordinate model, the traversal of the board lines, the board storage,
the slide and merge of a move, the detection of won and lost boards and the spawn of new tiles.
"""

from .board import Board
from .coordinates import Direction, Position, all_positions, neighbor
from .merge import merge_line, slide_and_merge
from .spawner import draw_index, spawn_tile
from .terminal import is_lost, is_won
from .traversal import line, line_heads

__all__ = [
    "Board",
    "Direction",
    "Position",
    "all_positions",
    "neighbor",
    "line",
    "line_heads",
    "merge_line",
    "slide_and_merge",
    "is_won",
    "is_lost",
    "draw_index",
    "spawn_tile",
]

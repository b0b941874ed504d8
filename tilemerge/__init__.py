# -*- coding: utf-8 -*-
"""
Rule engine of a sliding-tile merge puzzle played on a 6x6 board.
"""

from tilemerge.core import Board, Direction, Position
from tilemerge.envs import GameState, GameStatus, new_game

__all__ = ["Board", "Direction", "Position", "GameState", "GameStatus", "new_game"]

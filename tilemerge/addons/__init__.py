# -*- coding: utf-8 -*-
"""
Constants and settings shared by the game core and the manual control window.
"""

from .config import BOARD_SIZE, SPAWN_TILE, WIN_TILE, ControlConfig

__all__ = ["BOARD_SIZE", "SPAWN_TILE", "WIN_TILE", "ControlConfig"]

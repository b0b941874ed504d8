# -*- coding: utf-8 -*-
"""
Game state machine of the 6x6 tile merge puzzle.

This module provides the `GameState` class, which applies moves to the board and tracks whether the game is won or lost.
"""

from .game import GameState, GameStatus, new_game

__all__ = ["GameState", "GameStatus", "new_game"]

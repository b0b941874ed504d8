# -*- coding: utf-8 -*-
"""
Play the 6x6 tile merge game with the keyboard.
"""
import logging
from typing import Any

from tilemerge.addons import BOARD_SIZE, ControlConfig
from tilemerge.core import Direction
from tilemerge.envs import GameState, new_game
from tilemerge.utils import WindowBoard


class ManualControl:
    """
    Route keyboard events to a game and redraw it.

    Parameters
    ----------
    window : WindowBoard
        Class to draw the game board.
    config : ControlConfig
        Key bindings.
    """

    def __init__(self, window: WindowBoard, config: ControlConfig):
        self.window = window
        self.config = config
        self.game: GameState = new_game()

    def redraw(self):
        """Redraw the game board and its status line."""
        self.window.show_image(self.game.observation, self.game.status_message)

    def reset(self):
        """Start a new game and redraw it."""
        self.game = new_game()
        self.redraw()

    def key_handler(self, event: Any):
        """
        Handle the keyboard.

        Parameters
        ----------
        event: Any
            event to handle
        """
        if event.key == self.config.quit_key:
            self.window.close()
            return None

        if event.key == self.config.restart_key:
            self.reset()
            return None

        if event.key in self.config.bindings:
            direction = Direction(self.config.bindings[event.key])
            if self.game.apply_move(direction):
                self.redraw()
        return None


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    control_config = ControlConfig()
    window_board = WindowBoard(title=control_config.title, size=BOARD_SIZE)
    control = ManualControl(window_board, control_config)
    window_board.register_key_handler(control.key_handler)

    control.redraw()

    # Blocking event loop
    window_board.show(block=True)

# -*- coding: utf-8 -*-
"""
Graphical window for manual play.

Draws the 6x6 board with Matplotlib, shows the status line as the figure title and forwards the
keyboard events to a handler.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray


class WindowBoard:
    """
    A class for rendering the game board using Matplotlib.

    Notes
    -----
    - Each cell is drawn as its own subplot, coloured after its value.
    - Keyboard events can be captured for user input.
    """

    # ##: Colors mapping for different tile values, spawned tiles start at 1.
    COLORS = {
        0: "#CCC0B3",
        1: "#F5EFE6",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
    }

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The number of cells on each side of the board.
        """
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._release_default_keys()
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _release_default_keys(self):
        """
        Disconnect Matplotlib's own keyboard shortcuts from the window.

        Notes
        -----
        The game keys overlap the default keymap (``s`` saves the figure, ``f`` toggles fullscreen), so every
        key press is left to the registered game handler.
        """
        manager = self.fig.canvas.manager
        handler_id = getattr(manager, "key_press_handler_id", None)
        if handler_id is not None:
            self.fig.canvas.mpl_disconnect(handler_id)
            manager.key_press_handler_id = None
        self.default_key_handler_id = handler_id

    def _setup_axes(self, size: int):
        """Create one subplot and one text per cell."""
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_axis_off()

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        """Mark the window as closed."""
        self.closed = True

    def show_image(self, board: ndarray, status: str = ""):
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            The current state of the game board to be displayed.
        status : str, optional
            Status line drawn above the board.
        """
        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            ax.set_facecolor(self.COLORS.get(value, "#FFFFFF"))
        self.fig.suptitle(status)

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """Register a function called on every key press."""
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window."""
        plt.close(self.fig)
        self.closed = True

"""
Configuration for the 6x6 tile merge game and its manual control window.
"""

from dataclasses import dataclass, field

# ##>: Board geometry, fixed for this game.
BOARD_SIZE: int = 6

# ##>: Any tile reaching this value wins the game.
WIN_TILE: int = 2048

# ##>: Value of every spawned tile.
SPAWN_TILE: int = 1


@dataclass(frozen=True)
class ControlConfig:
    """
    Keyboard and window settings for manual play.

    Bindings map a key name to a direction name, resolved with ``Direction(name)``.
    """

    title: str = '2048 Game'
    bindings: dict[str, str] = field(
        default_factory=lambda: {
            'e': 'up',
            's': 'left',
            'd': 'down',
            'f': 'right',
            'E': 'up',
            'S': 'left',
            'D': 'down',
            'F': 'right',
        }
    )
    quit_key: str = 'escape'
    restart_key: str = 'backspace'

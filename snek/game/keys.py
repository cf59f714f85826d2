"""
Toolkit-neutral keys understood by the game.

Windowing layers translate their own key codes into Key before calling
SnakeGame.handle_key (see controls.py for the pygame translation).
"""
from enum import Enum
from typing import Optional

from .direction import Direction


class Key(Enum):
    """Keyboard keys the game reacts to."""
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"
    R = "r"


KEY_DIRECTIONS = {
    Key.W: Direction.UP,
    Key.UP: Direction.UP,
    Key.A: Direction.LEFT,
    Key.LEFT: Direction.LEFT,
    Key.S: Direction.DOWN,
    Key.DOWN: Direction.DOWN,
    Key.D: Direction.RIGHT,
    Key.RIGHT: Direction.RIGHT,
}


def direction_for_key(key: Key) -> Optional[Direction]:
    """Return the direction a key steers towards, or None."""
    return KEY_DIRECTIONS.get(key)

"""
Snek game module.

Pure game logic; controls.py holds the pygame input adapter and is imported
separately so the core stays usable without a display toolkit.
"""

from .config import GameSettings, ConfigError
from .direction import Direction, Point
from .keys import Key, KEY_DIRECTIONS, direction_for_key
from .snake import Snake
from .snake_game import SnakeGame, GameState

__all__ = [
    'SnakeGame',
    'GameState',
    'GameSettings',
    'ConfigError',
    'Snake',
    'Direction',
    'Point',
    'Key',
    'KEY_DIRECTIONS',
    'direction_for_key',
]

"""
Snek game settings.
"""

from dataclasses import dataclass
from typing import Dict, Any, Tuple

# Coordinates are unsigned bytes and 255 marks a step below zero
MAX_BOARD_DIMENSION = 254


class ConfigError(ValueError):
    """Raised when a setting is outside its allowed range."""


@dataclass
class GameSettings:
    """Settings passed to SnakeGame at construction."""

    # Grid dimensions
    board_width: int = 45
    board_height: int = 45

    # Pixel size of one tile, for the drawing layer
    tile_size: int = 20

    # Speed: ticks per one-tile move
    updates_per_move: int = 1

    start_paused: bool = True

    def __post_init__(self):
        self.validate()

    @property
    def board_size(self) -> Tuple[int, int]:
        return (self.board_width, self.board_height)

    @property
    def window_size(self) -> Tuple[int, int]:
        """Pixel size of the whole board."""
        return (self.board_width * self.tile_size, self.board_height * self.tile_size)

    def validate(self) -> None:
        """
        Check every field.

        Raises:
            ConfigError: If a value is not a positive integer or a board
                dimension does not fit an 8-bit coordinate
        """
        for name in ("board_width", "board_height", "tile_size", "updates_per_move"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

        for name in ("board_width", "board_height"):
            if getattr(self, name) > MAX_BOARD_DIMENSION:
                raise ConfigError(
                    f"{name} must be at most {MAX_BOARD_DIMENSION}, got {getattr(self, name)}"
                )

        if not isinstance(self.start_paused, bool):
            raise ConfigError(f"start_paused must be a boolean, got {self.start_paused!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "board_width": self.board_width,
            "board_height": self.board_height,
            "tile_size": self.tile_size,
            "updates_per_move": self.updates_per_move,
            "start_paused": self.start_paused,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameSettings":
        """Create settings from dictionary, ignoring unknown keys."""
        return cls(
            board_width=data.get("board_width", 45),
            board_height=data.get("board_height", 45),
            tile_size=data.get("tile_size", 20),
            updates_per_move=data.get("updates_per_move", 1),
            start_paused=data.get("start_paused", True),
        )

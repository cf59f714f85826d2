"""
Grid coordinates and movement directions.

Coordinates are unsigned 8-bit values; moving past either end of the byte
range wraps around. Board-size wrap-around is handled by the snake, not here.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple

COORD_RANGE = 256
# Value produced by stepping below zero
WRAP_SENTINEL = COORD_RANGE - 1


@dataclass(frozen=True)
class Point:
    """A tile on the game grid."""
    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    def opposite(self) -> "Direction":
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]

    def move_pos(self, distance: int, point: Point) -> Point:
        """
        Move a point along this direction using 8-bit wrapping arithmetic.

        Args:
            distance: Number of tiles to move (may be negative)
            point: Starting point

        Returns:
            The moved point
        """
        x, y = point.x, point.y
        if self is Direction.UP:
            y = (y - distance) % COORD_RANGE
        elif self is Direction.DOWN:
            y = (y + distance) % COORD_RANGE
        elif self is Direction.RIGHT:
            x = (x + distance) % COORD_RANGE
        elif self is Direction.LEFT:
            x = (x - distance) % COORD_RANGE
        return Point(x, y)


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

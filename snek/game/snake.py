"""
Snake - body segments, heading and move timing.

The snake advances one tile every ``updates_per_move`` ticks and wraps
around the board edges.
"""
from collections import deque
from typing import Deque, Iterable, Optional, Tuple

from .direction import Direction, Point, WRAP_SENTINEL

SPAWN_POINT = Point(0, 0)


class Snake:
    """
    An ordered body of tiles with a committed and a pending heading.

    The head is ``segments[0]`` and the tail is ``segments[-1]``. Direction
    changes are buffered in ``pending_heading`` and only take effect at the
    next move.
    """

    def __init__(self, updates_per_move: int = 1, segments: Optional[Iterable[Point]] = None,
                 heading: Direction = Direction.RIGHT):
        """
        Initialize the snake.

        Args:
            updates_per_move: Ticks between two moves
            segments: Optional starting body, head first (defaults to the spawn tile)
            heading: Initial heading
        """
        if updates_per_move < 1:
            raise ValueError(f"updates_per_move must be positive, got {updates_per_move}")

        self.updates_per_move = updates_per_move
        self.segments: Deque[Point] = deque(segments) if segments is not None else deque([SPAWN_POINT])
        if not self.segments:
            raise ValueError("snake needs at least one segment")
        self.heading = heading
        self.pending_heading = heading
        self.move_counter = 0

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def head(self) -> Point:
        return self.segments[0]

    def reset(self, updates_per_move: Optional[int] = None) -> None:
        """Return to a single segment at the spawn tile, heading right."""
        if updates_per_move is not None:
            if updates_per_move < 1:
                raise ValueError(f"updates_per_move must be positive, got {updates_per_move}")
            self.updates_per_move = updates_per_move
        self.segments = deque([SPAWN_POINT])
        self.heading = Direction.RIGHT
        self.pending_heading = Direction.RIGHT
        self.move_counter = 0

    def set_pending_heading(self, direction: Direction) -> bool:
        """
        Queue a direction for the next move.

        Reversals are checked against the committed heading, so two quick
        turns inside one move window can still end up reversing.

        Returns:
            True if the direction was accepted
        """
        if direction == self.heading.opposite():
            return False
        self.pending_heading = direction
        return True

    def occupies(self, position: Point) -> bool:
        """Check whether any segment is on the given tile."""
        return position in self.segments

    def advance(self, apple_position: Optional[Point], board_size: Tuple[int, int]) -> Tuple[bool, bool]:
        """
        Count one tick and move if enough ticks have passed.

        Args:
            apple_position: Tile of the apple
            board_size: (width, height) of the board

        Returns:
            Tuple of (ate_apple, collided)
        """
        self.move_counter += 1
        if self.move_counter < self.updates_per_move:
            return False, False

        self.move_counter = 0
        self.heading = self.pending_heading

        moved = self.heading.move_pos(1, self.head)
        width, height = board_size
        moved = Point(_wrap(moved.x, width), _wrap(moved.y, height))

        # Checked before the tail is popped, so the vacating tail tile counts
        collided = moved in self.segments

        self.segments.appendleft(moved)

        ate_apple = moved == apple_position
        if not ate_apple:
            self.segments.pop()

        return ate_apple, collided


def _wrap(value: int, dimension: int) -> int:
    """Fold an 8-bit coordinate back onto a board axis."""
    if value == WRAP_SENTINEL:
        return dimension - 1
    if value >= dimension:
        return 0
    return value

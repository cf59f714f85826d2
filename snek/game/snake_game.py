"""
Snek Game Core - Pure game logic without rendering.

Owns the snake, the apple and the Lost/Running/Paused state machine. The
outer loop calls tick() once per update event and handle_key() once per
keyboard event.
"""
import logging
import random
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..core.game_interface import GameInterface, GameMetadata
from .config import GameSettings
from .direction import Point
from .keys import Key, direction_for_key
from .snake import Snake

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Top-level game states."""
    LOST = "lost"
    RUNNING = "running"
    PAUSED = "paused"


STATUS_TEXT = {
    GameState.LOST: "Game Over!",
    GameState.PAUSED: "Paused",
    GameState.RUNNING: None,
}


class SnakeGame(GameInterface):
    """
    Core snake game logic.

    The snake moves on a wrap-around grid and grows by one tile for every
    apple it eats. Running into its own body loses the game; only a restart
    (R key) leaves the lost state.
    """

    def __init__(self, settings: Optional[GameSettings] = None, rng: Optional[random.Random] = None):
        """
        Initialize the game.

        Args:
            settings: Board size, tile size and speed (defaults to GameSettings())
            rng: Random generator for apple placement
        """
        self.settings = settings if settings is not None else GameSettings()
        self.board_size: Tuple[int, int] = self.settings.board_size
        self.tile_size = self.settings.tile_size
        self.updates_per_move = self.settings.updates_per_move

        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.PAUSED if self.settings.start_paused else GameState.RUNNING
        self.snake = Snake(self.updates_per_move)
        self.apple_position: Optional[Point] = None
        self.frame_count = 0

        # For replay recording
        self.history: List[Dict[str, Any]] = []
        self.recording = False

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        return GameMetadata(
            name="Snek",
            id="snek",
            description="Eat apples, grow longer, don't bite yourself",
        )

    @property
    def segments(self) -> List[Point]:
        """Snake body, head first."""
        return list(self.snake.segments)

    @property
    def status_text(self) -> Optional[str]:
        return STATUS_TEXT[self.state]

    def get_score(self) -> int:
        return len(self.snake)

    def reset(self) -> Dict[str, Any]:
        """
        Restart with a fresh snake and apple.

        The game always comes back paused.

        Returns:
            Dictionary containing the initial game state
        """
        self.state = GameState.PAUSED
        self.snake = Snake(self.updates_per_move)
        self.frame_count = 0
        self._randomize_apple()
        logger.info("Game reset")

        self.history = []
        if self.recording:
            self._record_frame()

        return self.get_state()

    def tick(self) -> None:
        """Advance the simulation by one update while running."""
        if self.state is not GameState.RUNNING:
            return

        if self.apple_position is None:
            self._randomize_apple()

        self.frame_count += 1
        ate_apple, collided = self.snake.advance(self.apple_position, self.board_size)

        if collided:
            self.state = GameState.LOST
            logger.info("Snake ran into itself, score %d", self.get_score())
        elif ate_apple:
            logger.debug("Apple eaten at %s", self.apple_position)
            self.apple_position = None

        if self.recording:
            self._record_frame()

    def handle_key(self, key: Key, pressed: bool) -> None:
        """
        Apply one keyboard event.

        Args:
            key: Key that changed state
            pressed: True for a press; releases are ignored
        """
        if not pressed:
            return

        direction = direction_for_key(key)
        if direction is not None:
            self.snake.set_pending_heading(direction)
            return

        if key is Key.SPACE:
            self._toggle_pause()
        elif key is Key.R:
            self.reset()

    def _toggle_pause(self):
        if self.state is GameState.RUNNING:
            self.state = GameState.PAUSED
            logger.info("Game paused")
        elif self.state is GameState.PAUSED:
            self.state = GameState.RUNNING
            logger.info("Game running")

    def _randomize_apple(self):
        """
        Place the apple on a random tile not covered by the snake.

        Loops forever if the snake covers the whole board.
        """
        width, height = self.board_size
        apple = None
        while apple is None or self.snake.occupies(apple):
            apple = Point(self.rng.randrange(width), self.rng.randrange(height))
        self.apple_position = apple
        logger.debug("Apple placed at %s", apple)

    def start_recording(self):
        """Start recording game history for replay."""
        self.recording = True
        self.history = []
        self._record_frame()

    def stop_recording(self) -> List[Dict[str, Any]]:
        """Stop recording and return the history."""
        self.recording = False
        return self.history

    def _record_frame(self):
        """Record the current frame to history."""
        self.history.append(self.get_state())

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state for rendering.

        Returns:
            Dictionary containing full game state
        """
        width, height = self.board_size
        return {
            "snake": [p.to_dict() for p in self.snake.segments],
            "apple": self.apple_position.to_dict() if self.apple_position is not None else None,
            "direction": int(self.snake.heading),
            "state": self.state.value,
            "score": self.get_score(),
            "frame": self.frame_count,
            "width": width,
            "height": height,
            "tile_size": self.tile_size,
        }

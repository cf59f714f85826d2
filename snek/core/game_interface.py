"""
Abstract game interface for Snek.

The game implements GameInterface and provides GameMetadata. Windowing and
rendering layers only talk to the game through this contract.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, List, Optional


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Snek")
    id: str                             # Unique identifier (e.g., "snek")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version
    supports_human: bool = True         # Can humans play?


class GameInterface(ABC):
    """
    Abstract base class for tick-driven games.

    Games own their rules and state. The outer loop calls tick() at a fixed
    rate, forwards keyboard events to handle_key(), and reads get_state()
    for drawing.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Reset the game to initial state.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def tick(self) -> None:
        """Advance the simulation by one logical update."""
        pass

    @abstractmethod
    def handle_key(self, key: Any, pressed: bool) -> None:
        """
        Feed one keyboard event to the game.

        Args:
            key: The key that changed state
            pressed: True for a press, False for a release
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    @property
    def status_text(self) -> Optional[str]:
        """Overlay caption for the current state, if any."""
        return None

    # Optional recording support
    def start_recording(self) -> None:
        """Start recording game frames for replay."""
        pass

    def stop_recording(self) -> List[Dict[str, Any]]:
        """
        Stop recording and return recorded frames.

        Returns:
            List of frame dictionaries
        """
        return []

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0

"""
Core abstractions for Snek.

Provides the abstract interface the game exposes to rendering and input layers.
"""

from .game_interface import GameInterface, GameMetadata

__all__ = [
    'GameInterface',
    'GameMetadata',
]

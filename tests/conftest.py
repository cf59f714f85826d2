"""
Pytest configuration and fixtures for Snek tests.
"""

import random
import sys
from pathlib import Path

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def rng():
    """Provide a seeded random generator."""
    return random.Random(1234)


@pytest.fixture
def make_game(rng):
    """Factory for games on a small board."""
    from snek.game.config import GameSettings
    from snek.game.snake_game import SnakeGame

    def _make(width=10, height=10, updates_per_move=1, start_paused=True):
        settings = GameSettings(
            board_width=width,
            board_height=height,
            tile_size=20,
            updates_per_move=updates_per_move,
            start_paused=start_paused,
        )
        return SnakeGame(settings, rng=rng)

    return _make


@pytest.fixture
def running_game(make_game):
    """A game already switched to the running state."""
    from snek.game.keys import Key

    game = make_game()
    game.handle_key(Key.SPACE, True)
    return game


@pytest.fixture
def sample_config():
    """Provide sample configuration data for tests."""
    return {
        'game': {
            'board_width': 30,
            'board_height': 20,
            'tile_size': 16,
            'updates_per_move': 3,
            'start_paused': False,
        },
        'logging': {
            'level': 'debug',
            'log_file': None,
        },
    }

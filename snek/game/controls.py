"""
Pygame input adapter.

Translates pygame keyboard events into Key presses for the game core.
"""
import os
from typing import Optional, Tuple

# Suppress pygame messages
os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')

import pygame

from ..core.game_interface import GameInterface
from .keys import Key

PYGAME_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_r: Key.R,
}


def translate_event(event) -> Optional[Tuple[Key, bool]]:
    """
    Convert a pygame event into a key and press flag.

    Args:
        event: A pygame event

    Returns:
        (key, pressed) for known keyboard events, None otherwise
    """
    if event.type == pygame.KEYDOWN:
        pressed = True
    elif event.type == pygame.KEYUP:
        pressed = False
    else:
        return None

    key = PYGAME_KEYS.get(event.key)
    if key is None:
        return None
    return key, pressed


def dispatch_event(game: GameInterface, event) -> bool:
    """
    Forward a pygame event to the game if it is a known key.

    Returns:
        True if the event was handed to the game
    """
    translated = translate_event(event)
    if translated is None:
        return False

    key, pressed = translated
    game.handle_key(key, pressed)
    return True

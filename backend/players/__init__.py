"""
Player implementations for the terminal snake.

This module contains the player abstraction and the implementations that
decide where the snake's head turns.
"""

from .base import Player, is_reversal
from .keyboard_player import KeyboardPlayer, DEFAULT_KEY_MAP
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'is_reversal',
    'KeyboardPlayer',
    'DEFAULT_KEY_MAP',
    'RandomPlayer',
]

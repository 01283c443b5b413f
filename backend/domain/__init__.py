"""
Domain entities for the terminal snake game engine.

This module contains the core game entities that are independent of the
terminal frontend (drawing, key input, the event loop).
"""

from .constants import (
    Direction, ItemType,
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITES,
    INITIAL_LENGTH, ITEM_INTERVAL, DESTRUCTIVE_CHANCE,
)
from .geometry import wrap_increment, wrap_decrement, step, step_back
from .snake import Segment, Snake
from .items import Item, ItemPlacer
from .game_state import GameState

__all__ = [
    'Direction', 'ItemType',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITES',
    'INITIAL_LENGTH', 'ITEM_INTERVAL', 'DESTRUCTIVE_CHANCE',
    'wrap_increment', 'wrap_decrement', 'step', 'step_back',
    'Segment', 'Snake',
    'Item', 'ItemPlacer',
    'GameState',
]

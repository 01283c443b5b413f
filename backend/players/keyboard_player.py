"""
Keyboard player - turns key presses into headings.
"""

import curses
from typing import Dict, Optional

from domain.constants import Direction, UP, DOWN, LEFT, RIGHT
from domain.game_state import GameState
from .base import Player

DEFAULT_KEY_MAP: Dict[int, Direction] = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
    ord('w'): UP,
    ord('s'): DOWN,
    ord('a'): LEFT,
    ord('d'): RIGHT,
}


class KeyboardPlayer(Player):
    """
    Remembers the last steering key pressed and hands it out once.
    """

    def __init__(self, key_map: Optional[Dict[int, Direction]] = None):
        self.key_map = dict(key_map or DEFAULT_KEY_MAP)
        self.pending: Optional[Direction] = None

    def press(self, key: int) -> bool:
        """Record a key press. Returns False for keys that don't steer."""
        direction = self.key_map.get(key)
        if direction is None:
            return False
        self.pending = direction
        return True

    def get_heading(self, game_state: GameState) -> Optional[Direction]:
        direction, self.pending = self.pending, None
        return direction

"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.constants import Direction, OPPOSITES
from domain.game_state import GameState


def is_reversal(current: Optional[Direction], requested: Direction) -> bool:
    """True when `requested` points straight back the way the head is going."""
    return current is not None and OPPOSITES[current] == requested


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning a heading for the snake given
    the current game state.
    """

    def get_heading(self, game_state: GameState) -> Optional[Direction]:
        """
        Return the direction the head should turn to, or None to keep going.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, or None for no change
        """
        raise NotImplementedError

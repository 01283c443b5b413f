"""
Random player implementation - an autopilot that wanders the canvas.
"""

import random
from typing import List, Optional

from domain.constants import Direction, VALID_MOVES
from domain.game_state import GameState
from .base import Player, is_reversal

DEFAULT_TURN_CHANCE = 0.25


class RandomPlayer(Player):
    """
    Picks a random direction that doesn't reverse the snake, now and then.

    On most ticks it keeps the current heading; with `turn_chance` it turns.
    """

    def __init__(self, rng: Optional[random.Random] = None, turn_chance: float = DEFAULT_TURN_CHANCE):
        self.rng = rng or random.Random()
        self.turn_chance = turn_chance

    def get_heading(self, game_state: GameState) -> Optional[Direction]:
        if self.rng.random() >= self.turn_chance:
            return None

        current = game_state.heading
        # Sorted so a seeded rng picks the same move every run
        valid_moves: List[Direction] = sorted(
            (move for move in VALID_MOVES if move != current and not is_reversal(current, move)),
            key=lambda move: move.value,
        )
        if not valid_moves:
            return None
        return self.rng.choice(valid_moves)

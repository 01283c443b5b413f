"""
Tests for players/ - keyboard and random (autopilot) players.
"""

import curses
import os
import random
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, OPPOSITES
from domain.game_state import GameState
from players import Player, KeyboardPlayer, RandomPlayer, is_reversal


def state_heading(direction):
    return GameState(
        tick_number=0,
        segments=[(1.0, 1.0, direction), (2.0, 1.0, direction)],
        items=[],
        width=10.0,
        height=10.0,
    )


class TestIsReversal:
    @pytest.mark.parametrize("direction", [UP, RIGHT, DOWN, LEFT])
    def test_opposite_is_a_reversal(self, direction):
        assert is_reversal(direction, OPPOSITES[direction])

    def test_same_and_perpendicular_are_not(self):
        assert not is_reversal(RIGHT, RIGHT)
        assert not is_reversal(RIGHT, UP)

    def test_no_current_heading(self):
        assert not is_reversal(None, LEFT)


class TestPlayer:
    def test_base_player_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Player().get_heading(state_heading(UP))


class TestKeyboardPlayer:
    """Tests for the KeyboardPlayer class."""

    def test_arrow_keys(self):
        player = KeyboardPlayer()
        for key, direction in [
            (curses.KEY_UP, UP), (curses.KEY_DOWN, DOWN),
            (curses.KEY_LEFT, LEFT), (curses.KEY_RIGHT, RIGHT),
        ]:
            assert player.press(key) is True
            assert player.get_heading(state_heading(UP)) == direction

    def test_wasd(self):
        player = KeyboardPlayer()
        player.press(ord('a'))
        assert player.get_heading(state_heading(UP)) == LEFT

    def test_heading_is_handed_out_once(self):
        player = KeyboardPlayer()
        player.press(curses.KEY_UP)
        player.get_heading(state_heading(RIGHT))
        assert player.get_heading(state_heading(RIGHT)) is None

    def test_last_press_wins(self):
        player = KeyboardPlayer()
        player.press(curses.KEY_UP)
        player.press(curses.KEY_LEFT)
        assert player.get_heading(state_heading(RIGHT)) == LEFT

    def test_other_keys_are_ignored(self):
        player = KeyboardPlayer()
        assert player.press(ord('x')) is False
        assert player.get_heading(state_heading(RIGHT)) is None

    def test_custom_key_map(self):
        player = KeyboardPlayer(key_map={ord('k'): UP})
        assert player.press(curses.KEY_UP) is False
        assert player.press(ord('k')) is True


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_never_turns_with_zero_chance(self):
        player = RandomPlayer(rng=random.Random(1), turn_chance=0.0)
        for _ in range(50):
            assert player.get_heading(state_heading(RIGHT)) is None

    @pytest.mark.parametrize("current", [UP, RIGHT, DOWN, LEFT])
    def test_always_turns_sideways(self, current):
        """With a turn every tick it never reverses and never repeats the heading."""
        player = RandomPlayer(rng=random.Random(2), turn_chance=1.0)
        seen = set()
        for _ in range(50):
            move = player.get_heading(state_heading(current))
            assert move is not None
            assert move != current
            assert move != OPPOSITES[current]
            seen.add(move)
        assert len(seen) == 2

    def test_empty_snake_can_go_anywhere(self):
        player = RandomPlayer(rng=random.Random(3), turn_chance=1.0)
        state = GameState(tick_number=0, segments=[], items=[], width=10.0, height=10.0)
        moves = {player.get_heading(state) for _ in range(100)}
        assert moves == {UP, RIGHT, DOWN, LEFT}

    def test_seeded_players_agree(self):
        a = RandomPlayer(rng=random.Random(4))
        b = RandomPlayer(rng=random.Random(4))
        state = state_heading(UP)
        assert [a.get_heading(state) for _ in range(30)] == [b.get_heading(state) for _ in range(30)]

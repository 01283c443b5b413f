"""
Coordinate arithmetic on the wrapping canvas.

Overflow is mirrored rather than taken modulo the bound: stepping past the
upper edge lands on ``bound - value - 1`` and stepping below zero lands on
``bound + value``.
"""

from typing import Tuple

from .constants import Direction, OPPOSITES, UP, RIGHT, DOWN, LEFT


def wrap_increment(value: float, bound: float) -> float:
    if value >= bound:
        return bound - value - 1
    return value + 1


def wrap_decrement(value: float, bound: float) -> float:
    if value <= 0:
        return bound + value
    return value - 1


def step(x: float, y: float, direction: Direction, width: float, height: float) -> Tuple[float, float]:
    """Return the cell one move away from (x, y) in the given direction."""
    if direction == UP:
        return x, wrap_increment(y, height)
    if direction == RIGHT:
        return wrap_increment(x, width), y
    if direction == DOWN:
        return x, wrap_decrement(y, height)
    if direction == LEFT:
        return wrap_decrement(x, width), y
    raise ValueError(f"Unknown direction: {direction!r}")


def step_back(x: float, y: float, direction: Direction, width: float, height: float) -> Tuple[float, float]:
    """Return the cell one move behind (x, y) for something heading in direction."""
    return step(x, y, OPPOSITES[direction], width, height)

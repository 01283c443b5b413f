"""
Game constants for the terminal snake.
"""

from enum import Enum


class Direction(str, Enum):
    """Movement directions. UP increases y, RIGHT increases x."""

    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"
    LEFT = "LEFT"


class ItemType(str, Enum):
    APPLE = "APPLE"
    MUSHROOM = "MUSHROOM"
    HEDGEHOG = "HEDGEHOG"
    BOULDER = "BOULDER"


UP = Direction.UP
RIGHT = Direction.RIGHT
DOWN = Direction.DOWN
LEFT = Direction.LEFT
VALID_MOVES = {UP, RIGHT, DOWN, LEFT}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

VERTICAL = {UP, DOWN}

# Item kinds a spawn may pick from
BENEFICIAL_ITEMS = (ItemType.APPLE, ItemType.MUSHROOM)
DESTRUCTIVE_ITEMS = (ItemType.HEDGEHOG, ItemType.BOULDER)

# Game settings
INITIAL_LENGTH = 13
ITEM_INTERVAL = 15  # ticks between item spawns
DESTRUCTIVE_CHANCE = 0.2  # chance of chaining a destructive item onto a spawn
DEFAULT_CANVAS_LENGTH = 10.0

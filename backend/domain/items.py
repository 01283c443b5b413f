"""
Items on the canvas and the random generator that places them.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .constants import ItemType, BENEFICIAL_ITEMS, DESTRUCTIVE_ITEMS, DESTRUCTIVE_CHANCE
from .snake import Segment

logger = logging.getLogger(__name__)


@dataclass
class Item:
    item_type: ItemType
    x: float
    y: float

    @property
    def cell(self) -> Tuple[float, float]:
        return (self.x, self.y)


class ItemPlacer:
    """
    Places items on free cells of the canvas.

    A single call to generate() always places one beneficial item first. After
    each placement there is a `destructive_chance` chance of chaining another
    spawn, and every chained spawn is a destructive one.
    """

    def __init__(self, rng: random.Random, destructive_chance: float = DESTRUCTIVE_CHANCE):
        self.rng = rng
        self.destructive_chance = destructive_chance

    def random_cell(self, width: float, height: float) -> Tuple[float, float]:
        """Pick a cell away from the left columns and the edge rows."""
        x = self.rng.randrange(2, int(width - 1))
        y = self.rng.randrange(1, int(height - 1))
        return (float(x), float(y))

    def find_free_cell(
        self,
        width: float,
        height: float,
        segments: Sequence[Segment],
        items: Sequence[Item],
    ) -> Tuple[float, float]:
        """
        Sample a cell and resample whenever a segment or item is found on it.

        The segments and items are each scanned once; a resampled cell is only
        checked against whatever is left to scan, not the entries already seen.
        """
        cell = self.random_cell(width, height)
        for segment in segments:
            if segment.cell == cell:
                cell = self.random_cell(width, height)
        for item in items:
            if item.cell == cell:
                cell = self.random_cell(width, height)
        return cell

    def generate(
        self,
        width: float,
        height: float,
        segments: Sequence[Segment],
        items: Sequence[Item],
    ) -> List[Item]:
        """
        Return the items placed by one spawn. The caller owns inserting them.

        Items placed earlier in the same call count as occupied cells for the
        later ones.
        """
        placed: List[Item] = []
        destructive = False
        while True:
            x, y = self.find_free_cell(width, height, segments, list(items) + placed)
            candidates = DESTRUCTIVE_ITEMS if destructive else BENEFICIAL_ITEMS
            item = Item(item_type=self.rng.choice(candidates), x=x, y=y)
            placed.append(item)
            logger.debug(f"Spawned {item.item_type.value} at ({x}, {y})")

            if self.rng.random() < self.destructive_chance:
                destructive = True
                continue
            return placed

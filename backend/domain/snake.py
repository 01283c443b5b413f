"""
Snake entity for the game engine.
"""

from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .constants import Direction, RIGHT, INITIAL_LENGTH


@dataclass
class Segment:
    """One cell of the snake's body. Every segment carries its own direction."""

    x: float
    y: float
    direction: Direction = RIGHT

    @property
    def cell(self) -> Tuple[float, float]:
        return (self.x, self.y)


class Snake:
    """
    Represents the snake on the canvas.

    Attributes:
        segments: deque of Segment from the tail at index 0 to the head at the end
    """

    def __init__(self, segments: Iterable[Segment]):
        self.segments = deque(segments)

    @classmethod
    def initial(cls, length: int = INITIAL_LENGTH) -> "Snake":
        """A straight body along y = 0 heading right, tail at x = 1."""
        return cls(Segment(x=float(x), y=0.0, direction=RIGHT) for x in range(1, length + 1))

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    @property
    def head(self) -> Segment:
        """Return the head segment (last element)."""
        return self.segments[-1]

    @property
    def tail(self) -> Segment:
        """Return the tail segment (first element)."""
        return self.segments[0]

    @property
    def neck(self) -> Optional[Segment]:
        """Return the segment right behind the head, if there is one."""
        if len(self.segments) < 2:
            return None
        return self.segments[-2]

    def set_heading(self, direction: Direction) -> None:
        # Only the head turns; the rest of the body follows on later ticks
        self.head.direction = direction

    def grow_tail(self, segment: Segment) -> None:
        self.segments.appendleft(segment)

    def drop_tail(self) -> Segment:
        return self.segments.popleft()

    def cells(self) -> List[Tuple[float, float]]:
        return [segment.cell for segment in self.segments]

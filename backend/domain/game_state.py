"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional, Tuple

from .constants import Direction, ItemType

ITEM_MARKERS = {
    ItemType.APPLE: "A",
    ItemType.MUSHROOM: "M",
    ItemType.HEDGEHOG: "H",
    ItemType.BOULDER: "B",
}

HEAD_MARKERS = {
    Direction.UP: "^",
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
}


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many ticks have run (0-based)
        segments: list of (x, y, direction) from tail to head
        items: list of (item_type, x, y) in insertion order
        width, height: canvas bounds used for wrapping
        playing: whether the engine is running
    """

    def __init__(
        self,
        tick_number: int,
        segments: List[Tuple[float, float, Direction]],
        items: List[Tuple[ItemType, float, float]],
        width: float,
        height: float,
        playing: bool = False
    ):
        self.tick_number = tick_number
        self.segments = segments
        self.items = items
        self.width = width
        self.height = height
        self.playing = playing

    @property
    def heading(self) -> Optional[Direction]:
        """Direction of the head segment, None for an empty body."""
        if not self.segments:
            return None
        return self.segments[-1][2]

    @property
    def length(self) -> int:
        return len(self.segments)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A, M, H, B = apple, mushroom, hedgehog, boulder
        o = snake body
        ^ > v < = snake head, pointing where it is heading
        (0,0) is at the bottom left. Cells outside the canvas are not drawn.
        """
        width = int(self.width)
        height = int(self.height)
        board = [['.' for _ in range(width)] for _ in range(height)]

        def place(x: float, y: float, marker: str) -> None:
            col, row = int(x), int(y)
            if 0 <= col < width and 0 <= row < height:
                board[row][col] = marker

        for item_type, x, y in self.items:
            place(x, y, ITEM_MARKERS[item_type])

        # Head last so it wins over anything sharing its cell
        for index, (x, y, direction) in enumerate(self.segments):
            if index == len(self.segments) - 1:
                place(x, y, HEAD_MARKERS[direction])
            else:
                place(x, y, 'o')

        result = []
        for y in range(height - 1, -1, -1):
            result.append(f"{y:2d} {''.join(board[y])}")
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, length={self.length}, "
            f"items={len(self.items)}, heading={self.heading}>"
        )

"""
Curses renderer for the game and its menu.

The game's y axis points up while curses counts rows down from the top, so a
cell at (x, y) is drawn at row height - 1 - y. Anything that wandered off the
visible canvas (the wrap rule briefly allows x == width or y == -1) is
skipped rather than drawn.
"""

import curses
import logging
from typing import Dict, List, Tuple

from domain.constants import Direction, ItemType, UP, RIGHT, DOWN, LEFT, VERTICAL
from domain.geometry import step

logger = logging.getLogger(__name__)

# Colour pair ids (curses pairs start at 1)
PAIR_SNAKE = 1
PAIR_TONGUE = 2
PAIR_APPLE = 3
PAIR_MUSHROOM = 4
PAIR_HEDGEHOG = 5
PAIR_BOULDER = 6
PAIR_MENU = 7
PAIR_HIGHLIGHT = 8

# pair -> (256-colour index, fallback basic colour)
PALETTE: Dict[int, Tuple[int, int]] = {
    PAIR_SNAKE: (191, curses.COLOR_GREEN),
    PAIR_TONGUE: (196, curses.COLOR_RED),
    PAIR_APPLE: (160, curses.COLOR_RED),
    PAIR_MUSHROOM: (166, curses.COLOR_YELLOW),
    PAIR_HEDGEHOG: (216, curses.COLOR_MAGENTA),
    PAIR_BOULDER: (95, curses.COLOR_WHITE),
    PAIR_MENU: (204, curses.COLOR_MAGENTA),
    PAIR_HIGHLIGHT: (207, curses.COLOR_CYAN),
}

ITEM_PAIRS = {
    ItemType.APPLE: PAIR_APPLE,
    ItemType.MUSHROOM: PAIR_MUSHROOM,
    ItemType.HEDGEHOG: PAIR_HEDGEHOG,
    ItemType.BOULDER: PAIR_BOULDER,
}

TONGUE_PERIOD = 4


class Glyphs:
    """Characters used to draw the snake and items."""

    HEADS = {UP: "▲", RIGHT: "▶", DOWN: "▼", LEFT: "◀"}
    TONGUES = {UP: "↑", RIGHT: "→", DOWN: "↓", LEFT: "←"}
    BODY = ("█", "▓")  # alternates along the body, counted from the head
    ITEMS = {
        ItemType.APPLE: "🍎",
        ItemType.MUSHROOM: "🍄",
        ItemType.HEDGEHOG: "🦔",
        ItemType.BOULDER: "🟤",
    }
    HIGHLIGHT = "→"


class AsciiGlyphs(Glyphs):
    """Plain ASCII for terminals without emoji or box-drawing fonts."""

    HEADS = {UP: "^", RIGHT: ">", DOWN: "v", LEFT: "<"}
    TONGUES = {UP: "'", RIGHT: "-", DOWN: ",", LEFT: "-"}
    BODY = ("O", "o")
    ITEMS = {
        ItemType.APPLE: "A",
        ItemType.MUSHROOM: "M",
        ItemType.HEDGEHOG: "H",
        ItemType.BOULDER: "B",
    }
    HIGHLIGHT = ">"


HELP_LINES = [
    "Arrow keys / WASD  steer the snake",
    "Esc                back to the menu",
    "q                  quit",
    "",
    "Apples and mushrooms make you longer.",
    "Hedgehogs bite off your tail.",
    "Boulders knock your head aside.",
    "Running into yourself cuts the snake short.",
    "",
    "Press any key to return.",
]


def tongue_visible(x: float, y: float, direction: Direction) -> bool:
    """The tongue flickers: shown only on every fourth cell along the travel axis."""
    coordinate = y if direction in VERTICAL else x
    return coordinate % TONGUE_PERIOD == 0


class TerminalRenderer:
    """Draws game and menu screens onto a curses window."""

    def __init__(self, window, ascii_glyphs: bool = False):
        self.window = window
        self.glyphs = AsciiGlyphs if ascii_glyphs else Glyphs
        self.colors_enabled = False

    def setup(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal can't hide the cursor")
        self.init_colors()

    def init_colors(self) -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        curses.use_default_colors()
        self.colors_enabled = True
        rich = curses.COLORS >= 256
        for pair, (indexed, basic) in PALETTE.items():
            curses.init_pair(pair, indexed if rich else basic, -1)

    def size(self) -> Tuple[int, int]:
        """Return the drawable (width, height) in cells."""
        rows, cols = self.window.getmaxyx()
        return cols, rows

    def _attr(self, pair: int) -> int:
        if not self.colors_enabled or not pair:
            return 0
        return curses.color_pair(pair)

    def _put(self, col: int, row: int, text: str, pair: int = 0) -> None:
        width, height = self.size()
        if not (0 <= col < width and 0 <= row < height):
            return
        try:
            self.window.addstr(row, col, text, self._attr(pair))
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen
            pass

    def _put_cell(self, x: float, y: float, text: str, pair: int = 0) -> None:
        _, height = self.size()
        self._put(int(x), height - 1 - int(y), text, pair)

    def draw_game(self, game) -> None:
        self.window.erase()
        segments = game.segments
        width, height = game.canvas_x_length, game.canvas_y_length

        if segments:
            head = segments[-1]
            tongue_x, tongue_y = step(head.x, head.y, head.direction, width, height)
            # Head first, walking back towards the tail
            for index, segment in enumerate(reversed(segments)):
                if index == 0:
                    glyph = self.glyphs.HEADS[segment.direction]
                else:
                    glyph = self.glyphs.BODY[index % 2]
                self._put_cell(segment.x, segment.y, glyph, PAIR_SNAKE)
            if tongue_visible(tongue_x, tongue_y, head.direction):
                self._put_cell(tongue_x, tongue_y, self.glyphs.TONGUES[head.direction], PAIR_TONGUE)

        for item in game.items:
            self._put_cell(item.x, item.y, self.glyphs.ITEMS[item.item_type], ITEM_PAIRS[item.item_type])

        self.window.refresh()

    def draw_menu(self, title: str, labels: List[str], selected: int, margin: int = 5) -> None:
        self.window.erase()
        width, height = self.size()
        self._draw_box(margin, margin, width - 2 * margin, height - 2 * margin, title)
        for index, label in enumerate(labels):
            row = margin + 1 + index
            if index == selected:
                self._put(margin + 1, row, f"{self.glyphs.HIGHLIGHT}{label}", PAIR_HIGHLIGHT)
            else:
                self._put(margin + 2, row, label, PAIR_MENU)
        self.window.refresh()

    def draw_help(self, margin: int = 2) -> None:
        self.window.erase()
        width, height = self.size()
        self._draw_box(margin, margin, width - 2 * margin, height - 2 * margin, "Help")
        for index, line in enumerate(HELP_LINES):
            self._put(margin + 2, margin + 1 + index, line, PAIR_MENU)
        self.window.refresh()

    def _draw_box(self, col: int, row: int, width: int, height: int, title: str) -> None:
        if width < 2 or height < 2:
            return
        right, bottom = col + width - 1, row + height - 1
        self._put(col, row, "┌" + "─" * (width - 2) + "┐", PAIR_MENU)
        for r in range(row + 1, bottom):
            self._put(col, r, "│", PAIR_MENU)
            self._put(right, r, "│", PAIR_MENU)
        self._put(col, bottom, "└" + "─" * (width - 2) + "┘", PAIR_MENU)
        self._put(col + 1, row, title, PAIR_MENU)

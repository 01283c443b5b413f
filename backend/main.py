import argparse
import curses
import json
import logging
import os
import random
import sys
from collections import Counter
from typing import Any, Dict, List, Optional

from config import Settings, load_settings, configure_logging
from domain.constants import (
    Direction, ItemType,
    UP, RIGHT, DOWN, LEFT, VERTICAL,
    ITEM_INTERVAL, DESTRUCTIVE_CHANCE, DEFAULT_CANVAS_LENGTH,
)
from domain.game_state import GameState
from domain.geometry import step, step_back
from domain.items import Item, ItemPlacer
from domain.snake import Segment, Snake
from players import KeyboardPlayer, Player, RandomPlayer, is_reversal
from services.events import EventPump, Event, KeyPress, Tick
from services.menu import Menu, RESUME, NEW_GAME, HELP, QUIT
from services.renderer import TerminalRenderer

logger = logging.getLogger(__name__)

QUIT_KEY = ord('q')
ESCAPE_KEY = 27
INPUT_POLL_MS = 50


class SnakeGame:
    """
    Manages:
      - Snake body (tail first, head last)
      - Items on the canvas, in the order they were placed
      - Canvas bounds used for wrapping
      - Countdown to the next item spawn
    """
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        snake: Optional[Snake] = None,
        item_interval: int = ITEM_INTERVAL,
        destructive_chance: float = DESTRUCTIVE_CHANCE
    ):
        self.rng = rng or random.Random()
        self.snake = snake if snake is not None else Snake.initial()
        self.items: List[Item] = []
        self.placer = ItemPlacer(self.rng, destructive_chance)
        self.playing = False
        self.canvas_x_length = DEFAULT_CANVAS_LENGTH
        self.canvas_y_length = DEFAULT_CANVAS_LENGTH
        self.item_interval = item_interval
        self.need_items_in = 0
        self.tick_count = 0

    @property
    def segments(self) -> List[Segment]:
        """Body segments ordered tail to head."""
        return list(self.snake.segments)

    @property
    def heading(self) -> Direction:
        return self.snake.head.direction

    def set_heading(self, direction: Direction):
        """
        Turn the head. No reversal check happens here; callers go through
        apply_heading() for that.
        """
        self.snake.set_heading(direction)

    def resize_canvas(self, width: float, height: float):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas must have positive size, got {width}x{height}.")
        self.canvas_x_length = float(width)
        self.canvas_y_length = float(height)

    def generate_item(self) -> List[Item]:
        placed = self.placer.generate(
            self.canvas_x_length,
            self.canvas_y_length,
            self.segments,
            self.items
        )
        self.items.extend(placed)
        return placed

    def maybe_generate_item(self) -> List[Item]:
        """Spawn items whenever the countdown runs out, then count down one tick."""
        placed: List[Item] = []
        if self.need_items_in == 0:
            placed = self.generate_item()
            self.need_items_in = self.item_interval
        self.need_items_in -= 1
        return placed

    def tick(self):
        """
        Execute one simulation step:
          1) Move every segment one cell in its own direction
          2) Pass each segment the direction of the one ahead of it
          3) Apply the first item the head landed on, if any, and stop
          4) Otherwise cut the snake where the head ran into its body
        """
        assert len(self.snake) > 0, "tick() needs a non-empty snake"
        assert self.canvas_x_length > 0 and self.canvas_y_length > 0, "tick() needs a positive canvas"

        self.tick_count += 1
        self._move_segments()
        self._propagate_directions()

        head = self.snake.head
        for index, item in enumerate(self.items):
            if item.cell == head.cell:
                del self.items[index]
                self._apply_item(item)
                return

        self._check_self_collision()

    def _move_segments(self):
        for segment in self.snake:
            segment.x, segment.y = step(
                segment.x, segment.y, segment.direction,
                self.canvas_x_length, self.canvas_y_length
            )

    def _propagate_directions(self):
        # Walk tail to head so each segment reads its neighbour's pre-tick direction
        segments = self.snake.segments
        for i in range(len(segments) - 1):
            if segments[i].direction != segments[i + 1].direction:
                segments[i].direction = segments[i + 1].direction

    def _apply_item(self, item: Item):
        logger.debug(f"Tick {self.tick_count}: head picked up {item.item_type.value} at {item.cell}")
        if item.item_type in (ItemType.APPLE, ItemType.MUSHROOM):
            self._grow()
        elif item.item_type == ItemType.HEDGEHOG:
            self._shrink()
        elif item.item_type == ItemType.BOULDER:
            self._deflect_off_boulder()

    def _grow(self):
        tail = self.snake.tail
        x, y = step_back(tail.x, tail.y, tail.direction, self.canvas_x_length, self.canvas_y_length)
        self.snake.grow_tail(Segment(x=x, y=y, direction=tail.direction))

    def _shrink(self):
        # TODO end the game once a one-segment snake meets a hedgehog
        if len(self.snake) > 1:
            self.snake.drop_tail()
        else:
            logger.debug("Hedgehog ignored: the snake is down to its head")

    def _deflect_off_boulder(self):
        head = self.snake.head
        origin_x, origin_y = head.x, head.y

        # Knock the head to one side of where it was going
        choices = (RIGHT, LEFT) if head.direction in VERTICAL else (UP, DOWN)
        head.direction = self.rng.choice(choices)
        head.x, head.y = step(head.x, head.y, head.direction, self.canvas_x_length, self.canvas_y_length)

        neck = self.snake.neck
        if neck is not None:
            # Bring the head back one space along the neck's line of travel
            head.x, head.y = step_back(head.x, head.y, neck.direction, self.canvas_x_length, self.canvas_y_length)
            neck.direction = head.direction

        # Boulders are never consumed, only pushed back where the head was
        self.items.append(Item(item_type=ItemType.BOULDER, x=origin_x, y=origin_y))

    def _check_self_collision(self):
        segments = self.segments
        head = segments[-1]
        body_length = len(segments) - 1
        for index in range(body_length):
            if segments[index].cell == head.cell:
                keep = body_length - index
                while len(self.snake) > keep:
                    self.snake.drop_tail()
                logger.debug(f"Tick {self.tick_count}: snake bit itself at segment {index}, length now {keep}")
                return

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current canvas as a GameState.
        """
        return GameState(
            tick_number=self.tick_count,
            segments=[(s.x, s.y, s.direction) for s in self.snake],
            items=[(item.item_type, item.x, item.y) for item in self.items],
            width=self.canvas_x_length,
            height=self.canvas_y_length,
            playing=self.playing
        )


def new_game(rng: Optional[random.Random] = None) -> SnakeGame:
    """Start a game: 13 segments heading right, no items, items due on the first tick."""
    game = SnakeGame(rng=rng)
    logger.info("New game started")
    return game


def apply_heading(game: SnakeGame, direction: Optional[Direction]) -> bool:
    """
    Steer the snake the way input handling is allowed to: the head never turns
    straight back on itself. Returns True if the heading was set.
    """
    if direction is None or is_reversal(game.heading, direction):
        return False
    game.set_heading(direction)
    return True


class TerminalApp:
    """
    The interactive game: a menu, and a game that runs on timer ticks.

    Draw, then handle whatever events arrived, over and over. handle_event()
    returns False once the player quits.
    """
    def __init__(
        self,
        renderer: TerminalRenderer,
        rng: Optional[random.Random] = None,
        autopilot: Optional[Player] = None
    ):
        self.renderer = renderer
        self.rng = rng or random.Random()
        self.autopilot = autopilot
        self.keyboard = KeyboardPlayer()
        self.menu = Menu()
        self.game: Optional[SnakeGame] = None
        self.show_help = False

    @property
    def playing(self) -> bool:
        return self.game is not None and self.game.playing

    def draw(self):
        if self.playing:
            self.renderer.draw_game(self.game)
        elif self.show_help:
            self.renderer.draw_help()
        else:
            self.renderer.draw_menu("Snake", self.menu.labels(), self.menu.selected)

    def handle_event(self, event: Event) -> bool:
        if isinstance(event, KeyPress) and event.key == QUIT_KEY:
            return False
        if self.playing:
            self._handle_game_event(event)
            return True
        if isinstance(event, KeyPress):
            return self._handle_menu_key(event.key)
        return True

    def _handle_game_event(self, event: Event):
        game = self.game
        if isinstance(event, Tick):
            width, height = self.renderer.size()
            game.resize_canvas(width, height)
            game.maybe_generate_item()
            if self.autopilot is not None:
                apply_heading(game, self.autopilot.get_heading(game.get_current_state()))
            game.tick()
        elif isinstance(event, KeyPress):
            if event.key == ESCAPE_KEY:
                game.playing = False
                self.menu.set_game_in_progress(True)
                logger.info("Game paused")
            elif self.keyboard.press(event.key):
                apply_heading(game, self.keyboard.get_heading(game.get_current_state()))

    def _handle_menu_key(self, key: int) -> bool:
        if self.show_help:
            self.show_help = False
            return True

        action = self.menu.handle_key(key)
        if action == QUIT:
            return False
        if action == NEW_GAME:
            self.game = new_game(self.rng)
            self.game.playing = True
            self.menu.set_game_in_progress(True)
        elif action == RESUME and self.game is not None:
            self.game.playing = True
            logger.info("Game resumed")
        elif action == HELP:
            self.show_help = True
        return True


def run_terminal(window, settings: Settings, autoplay: bool = False):
    """curses.wrapper() entry point: wire the renderer and event sources to a TerminalApp."""
    renderer = TerminalRenderer(window, ascii_glyphs=settings.ascii_glyphs)
    renderer.setup()
    window.keypad(True)
    window.timeout(INPUT_POLL_MS)

    rng = random.Random(settings.seed)
    autopilot = RandomPlayer(rng=random.Random(settings.seed)) if autoplay else None
    app = TerminalApp(renderer, rng=rng, autopilot=autopilot)

    pump = EventPump()
    pump.start_ticker(settings.tick_seconds)
    try:
        running = True
        while running:
            app.draw()
            # curses is not thread-safe: keys are read here, on the drawing thread
            pump.push_key(window.getch())
            for event in pump.drain():
                if not app.handle_event(event):
                    running = False
                    break
    finally:
        pump.stop()

    if app.game is not None:
        state = app.game.get_current_state()
        logger.info(f"Quit after {state.tick_number} ticks with length {state.length}")
        logger.debug(f"Final board:\n{state.print_board()}")


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(ticks: int, width: int = 40, height: int = 20, seed: Optional[int] = None) -> Dict[str, Any]:
    """
    Runs a game without a terminal, steered by a RandomPlayer.

    Args:
        ticks: How many ticks to run.
        width, height: Canvas size.
        seed: Seed for the game and the autopilot.

    Returns:
        A dictionary summarizing the game (ticks, length, items by kind, board).
    """
    game = new_game(random.Random(seed))
    game.resize_canvas(width, height)
    game.playing = True
    player = RandomPlayer(rng=random.Random(seed))

    for _ in range(ticks):
        game.maybe_generate_item()
        apply_heading(game, player.get_heading(game.get_current_state()))
        game.tick()

    state = game.get_current_state()
    item_counts = Counter(item.item_type.value for item in game.items)
    return {
        "ticks": state.tick_number,
        "length": state.length,
        "heading": state.heading.value,
        "items": dict(sorted(item_counts.items())),
        "board": state.print_board()
    }


# -------------------------------
# Main Entry Point
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Play snake in the terminal."
    )
    parser.add_argument("--tick-ms", type=int, default=None,
                        help="Milliseconds between ticks (default: SNAKE_TICK_MS or 100)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for item placement (default: SNAKE_SEED or random)")
    parser.add_argument("--ascii", action="store_true",
                        help="Draw with plain ASCII instead of emoji")
    parser.add_argument("--autoplay", action="store_true",
                        help="Let a random autopilot steer")
    parser.add_argument("--headless", type=int, metavar="TICKS", default=None,
                        help="Run TICKS ticks without a terminal and print a summary")
    parser.add_argument("--width", type=int, default=40,
                        help="Canvas width for --headless (default: 40)")
    parser.add_argument("--height", type=int, default=20,
                        help="Canvas height for --headless (default: 20)")

    args = parser.parse_args()

    settings = load_settings()
    if args.tick_ms is not None:
        if args.tick_ms <= 0:
            parser.error("--tick-ms must be positive")
        settings.tick_ms = args.tick_ms
    if args.seed is not None:
        settings.seed = args.seed
    if args.ascii:
        settings.ascii_glyphs = True

    headless = args.headless is not None
    configure_logging(settings, to_file=not headless)

    try:
        if headless:
            result = run_simulation(args.headless, args.width, args.height, settings.seed)
            print(result.pop("board"))
            print(json.dumps(result, indent=2))
        else:
            # Esc pauses the game, so its key delay must stay short
            os.environ.setdefault("ESCDELAY", "25")
            curses.wrapper(run_terminal, settings, args.autoplay)
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

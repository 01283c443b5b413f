"""
Main menu shown whenever no game is running.
"""

import curses
from typing import List, Optional, Tuple

RESUME = "resume"
NEW_GAME = "new_game"
HELP = "help"
QUIT = "quit"

ENTER_KEYS = {curses.KEY_ENTER, 10, 13}

# (label, shortcut, action)
MENU_OPTIONS: List[Tuple[str, str, str]] = [
    ("New Game", "n", NEW_GAME),
    ("Help", "h", HELP),
    ("Quit", "q", QUIT),
]
RESUME_OPTION = ("Resume Game", "r", RESUME)

LABEL_WIDTH = 15


class Menu:
    """
    Menu state: which options are on offer and which one is highlighted.

    "Resume Game" is only offered while a game is in progress.
    """

    def __init__(self) -> None:
        self.selected = 0
        self.game_in_progress = False

    def options(self) -> List[Tuple[str, str, str]]:
        if self.game_in_progress:
            return [RESUME_OPTION] + MENU_OPTIONS
        return list(MENU_OPTIONS)

    def labels(self) -> List[str]:
        return [f"{label:<{LABEL_WIDTH}}({shortcut})" for label, shortcut, _ in self.options()]

    def set_game_in_progress(self, in_progress: bool) -> None:
        # "Resume Game" goes on top, keep the highlight on the same option
        if in_progress and not self.game_in_progress:
            self.selected += 1
        elif self.game_in_progress and not in_progress:
            self.selected = max(self.selected - 1, 0)
        self.game_in_progress = in_progress
        self.selected = min(self.selected, len(self.options()) - 1)

    def move_up(self) -> None:
        count = len(self.options())
        self.selected = self.selected - 1 if self.selected > 0 else count - 1

    def move_down(self) -> None:
        count = len(self.options())
        self.selected = 0 if self.selected >= count - 1 else self.selected + 1

    def handle_key(self, key: int) -> Optional[str]:
        """Apply a key press. Returns the chosen action, if any."""
        if key == curses.KEY_UP:
            self.move_up()
            return None
        if key == curses.KEY_DOWN:
            self.move_down()
            return None
        options = self.options()
        if key in ENTER_KEYS:
            return options[self.selected][2]
        for _, shortcut, action in options:
            if key == ord(shortcut):
                return action
        return None

"""
Event sources for the game loop.

A ticker thread pushes Ticks onto a queue and the game loop pushes the keys it
reads from the terminal onto the same queue. The loop then drains that queue
in arrival order, so game state is only ever touched by one event at a time
and the curses window is only ever touched by the loop's own thread.
"""

import logging
import threading
from dataclasses import dataclass
from queue import Empty, Queue
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

NO_KEY = -1  # what a curses window's getch() returns on timeout
JOIN_TIMEOUT = 1.0


class Event:
    """Base class for everything the game loop consumes."""


@dataclass
class Tick(Event):
    pass


@dataclass
class KeyPress(Event):
    key: int


class EventPump:
    """Merges timer ticks and key presses into a single ordered queue."""

    def __init__(self, queue: Optional[Queue] = None) -> None:
        self.events: Queue = queue if queue is not None else Queue()
        self._stop = threading.Event()
        self._threads: List[threading.Thread] = []

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def start_ticker(self, interval: float) -> threading.Thread:
        """Emit a Tick every `interval` seconds until stopped."""
        def target() -> None:
            while not self._stop.is_set():
                self.events.put(Tick())
                self._stop.wait(interval)

        return self._spawn(target, "ticker")

    def push_key(self, key: int) -> bool:
        """Queue a key read by the caller. NO_KEY is dropped; returns True if queued."""
        if key == NO_KEY:
            return False
        self.events.put(KeyPress(key=key))
        return True

    def get(self, timeout: Optional[float] = None) -> Event:
        return self.events.get(timeout=timeout)

    def drain(self) -> List[Event]:
        """Take every event queued so far without blocking."""
        pending = []
        while True:
            try:
                pending.append(self.events.get_nowait())
            except Empty:
                return pending

    def stop(self, timeout: float = JOIN_TIMEOUT) -> None:
        """Signal the producer threads and wait for them to finish."""
        self._stop.set()
        for thread in self._threads:
            thread.join(timeout)
            if thread.is_alive():
                logger.warning(f"{thread.name} did not stop within {timeout}s")
        self._threads = [thread for thread in self._threads if thread.is_alive()]

    def _spawn(self, target: Callable[[], None], name: str) -> threading.Thread:
        thread = threading.Thread(target=target, name=f"snake-{name}", daemon=True)
        self._threads.append(thread)
        thread.start()
        return thread

"""
Input services feeding keyboard events into the game loop.

Each service exposes poll(), which returns the next pending event or None
when nothing is waiting. The loop drains poll() once per animation frame.
"""

from collections import deque
from typing import Deque, Iterable, Optional

from domain.events import KeyboardEvent
from domain.game import Game
from players.base import Player


class InputService:
    """Base class/interface for input sources."""

    def poll(self) -> Optional[KeyboardEvent]:
        raise NotImplementedError


class QueuedInputService(InputService):
    """In-memory FIFO of events, filled by push()."""

    def __init__(self, events: Iterable[KeyboardEvent] = ()):
        self.events: Deque[KeyboardEvent] = deque(events)

    def push(self, event: KeyboardEvent) -> None:
        self.events.append(event)

    def poll(self) -> Optional[KeyboardEvent]:
        if not self.events:
            return None
        return self.events.popleft()


class CursesInputService(InputService):
    """
    Reads keys from a curses window without blocking.

    Terminals only report key presses, so every key becomes a press event.
    """

    def __init__(self, window):
        self.window = window
        self.window.nodelay(True)

    def poll(self) -> Optional[KeyboardEvent]:
        code = self.window.getch()
        if code < 0:
            return None
        return KeyboardEvent.press(chr(code))


class PlayerInputService(InputService):
    """
    Asks a Player for one key per accepted tick of the game.

    The player is consulted again only after the game's tick counter has
    moved on, so it plays at simulation speed however fast frames arrive.
    """

    def __init__(self, player: Player, game: Game):
        self.player = player
        self.game = game
        self.last_round: Optional[int] = None

    def poll(self) -> Optional[KeyboardEvent]:
        if self.game.round_number == self.last_round:
            return None

        self.last_round = self.game.round_number
        key = self.player.get_move(self.game.get_current_state())
        if key is None:
            return None
        return KeyboardEvent.press(key)

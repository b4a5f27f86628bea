"""
Heading of the snake and how keyboard input changes it.
"""

from enum import Enum
from typing import Optional

from .constants import KEY_BINDINGS
from .events import KeyboardEvent
from .geometry import Vector2D


class Direction(str, Enum):
    """
    One of the four cardinal headings.

    Reversing straight into the neck is allowed; the next tick then ends the
    game through the ordinary self-collision check.
    """

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @classmethod
    def from_keyboard_event(cls, event: KeyboardEvent) -> Optional["Direction"]:
        """Return the heading bound to a key press, or None for anything else."""
        if not event.is_press:
            return None

        move = KEY_BINDINGS.get(event.key)
        if move is None:
            return None
        return cls(move)

    def velocity(self) -> Vector2D:
        """Unit step for this heading."""
        return _VELOCITIES[self]


_VELOCITIES = {
    Direction.UP: Vector2D(0, -1),
    Direction.DOWN: Vector2D(0, 1),
    Direction.LEFT: Vector2D(-1, 0),
    Direction.RIGHT: Vector2D(1, 0),
}

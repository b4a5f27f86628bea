"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Optional

from .direction import Direction
from .geometry import Vector2D


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        position: the head cell; it is not part of the tail
        tail: deque of segments, newest (the previous head) at index 0
        ghost: deque of recently vacated cells, newest at index 0
        direction: current heading
        alive: whether this snake is still alive
        death_reason: 'self' or 'board_full'
        death_round: the tick number when the snake died
    """

    def __init__(
        self,
        position: Vector2D,
        tail: Iterable[Vector2D],
        ghost: Iterable[Vector2D] = (),
        direction: Direction = Direction.DOWN,
    ):
        self.position = position
        self.tail = deque(tail)
        self.ghost = deque(ghost)
        self.direction = direction
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_round: Optional[int] = None

    def __len__(self):
        return 1 + len(self.tail)

    def occupies(self, cell: Vector2D) -> bool:
        """True if cell is the head or any tail segment."""
        return cell == self.position or cell in self.tail

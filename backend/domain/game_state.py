"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional

from .direction import Direction
from .geometry import Vector2D


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        round_number: how many ticks have been applied (0-based)
        position: head cell
        tail: list of tail segments, newest first
        ghost: list of ghost-trail cells, newest first
        cherry: cherry cell, or None when the board had no room left
        width, height: board dimensions
        direction: heading at snapshot time
        alive: whether the snake is still alive
    """

    def __init__(
        self,
        round_number: int,
        position: Vector2D,
        tail: List[Vector2D],
        ghost: List[Vector2D],
        cherry: Optional[Vector2D],
        width: int,
        height: int,
        direction: Direction = Direction.DOWN,
        alive: bool = True,
    ):
        self.round_number = round_number
        self.position = position
        self.tail = tail
        self.ghost = ghost
        self.cherry = cherry
        self.width = width
        self.height = height
        self.direction = direction
        self.alive = alive

    @property
    def dimensions(self) -> Vector2D:
        return Vector2D(self.width, self.height)

    def print_board(self) -> str:
        """
        Returns the framed text grid for this snapshot:
        x = snake head
        o = snake tail
        . = ghost trail
        c = cherry
        (0,0) is the top-left cell.
        """
        from .renderer import render_frame

        return render_frame(self)

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, position={self.position}, "
            f"length={1 + len(self.tail)}, cherry={self.cherry}>"
        )

"""
Tile kinds and the raster ordering key used by the renderer.
"""

from enum import Enum
from typing import NamedTuple

from .geometry import Vector2D


class Tile(Enum):
    SNAKE_HEAD = "x"
    SNAKE_TAIL = "o"
    SNAKE_TAIL_GHOST = "."
    CHERRY = "c"
    SPACE = " "

    def draw(self) -> str:
        return self.value


class QueuedTile(NamedTuple):
    """
    A tile waiting to be drawn.

    weight is the inverted row-major index of the cell, so the top-left cell
    has the largest weight and comes out of a max-priority queue first.
    """

    tile: Tile
    weight: int

    @classmethod
    def new_within(cls, tile: Tile, position: Vector2D, bounds: Vector2D) -> "QueuedTile":
        return cls(tile, cls.weight_of(position, bounds))

    @staticmethod
    def weight_of(position: Vector2D, bounds: Vector2D) -> int:
        top = bounds.x * bounds.y
        return top - (position.x + position.y * bounds.x)

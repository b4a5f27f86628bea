"""
Integer 2D vectors used for every position and velocity on the board.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2D:
    """
    An immutable (x, y) pair with component-wise arithmetic.

    y grows downward, so (0, 0) is the top-left cell of the board.
    """

    x: int
    y: int

    @classmethod
    def scalar(cls, value: int) -> "Vector2D":
        """Return a vector with both components set to value."""
        return cls(value, value)

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mod__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x % other.x, self.y % other.y)

    def wrap(self, bound: "Vector2D") -> "Vector2D":
        """
        Wrap this vector onto a torus of size bound.

        Works for positions one step outside the board on either side, so a
        head leaving the left edge reappears on the right.
        """
        return (self + bound) % bound

    def as_tuple(self):
        return (self.x, self.y)

    def __repr__(self):
        return f"({self.x}, {self.y})"

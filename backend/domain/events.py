"""
Input events delivered by the host into the game.
"""

from dataclasses import dataclass

PRESS = "press"
RELEASE = "release"


@dataclass(frozen=True)
class KeyboardEvent:
    """
    A single key transition.

    Attributes:
        key: the character produced by the key, e.g. 'w'
        kind: PRESS or RELEASE
    """

    key: str
    kind: str = PRESS

    @classmethod
    def press(cls, key: str) -> "KeyboardEvent":
        return cls(key, PRESS)

    @classmethod
    def release(cls, key: str) -> "KeyboardEvent":
        return cls(key, RELEASE)

    @property
    def is_press(self) -> bool:
        return self.kind == PRESS

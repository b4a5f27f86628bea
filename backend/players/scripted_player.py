"""
Scripted player - replays a fixed sequence of keys, one per tick.
"""

from typing import Optional

from domain.game_state import GameState
from .base import Player

# Placeholder in a script for "press nothing this tick"
IDLE = "."


class ScriptedPlayer(Player):
    """
    Plays back a key script such as "ddds..a".

    Once the script runs out the player stops pressing keys, so the snake
    keeps its last heading.
    """

    name = "scripted"

    def __init__(self, script: str = ""):
        self.script = script
        self.cursor = 0

    def get_move(self, game_state: GameState) -> Optional[str]:
        if self.cursor >= len(self.script):
            return None

        key = self.script[self.cursor]
        self.cursor += 1
        return None if key == IDLE else key

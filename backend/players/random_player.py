"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import KEY_BINDINGS
from domain.direction import Direction
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a key whose next cell avoids the tail.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        tail = set(game_state.tail)
        bounds = game_state.dimensions

        # Filter out keys whose next head lands on the body.
        # The board wraps, so there are no walls to check.
        valid_keys: List[str] = []
        for key, move in sorted(KEY_BINDINGS.items()):
            next_cell = (game_state.position + Direction(move).velocity()).wrap(bounds)
            if next_cell in tail:
                continue
            valid_keys.append(key)

        # If no valid keys, just return a random one (we'll die anyway)
        if not valid_keys:
            return self.rng.choice(sorted(KEY_BINDINGS))

        return self.rng.choice(valid_keys)

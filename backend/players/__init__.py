"""
Player implementations for the tick snake.

Players stand in for a human at the keyboard: each tick they look at the
game state and choose a key to press.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]

"""
Domain entities for the tick snake game engine.

This module contains the core game entities that are independent of
host concerns (terminal, input devices, frame scheduling).
"""

from .constants import UP, DOWN, LEFT, RIGHT, KEY_BINDINGS, TICK_RATE
from .geometry import Vector2D
from .events import KeyboardEvent
from .direction import Direction
from .tiles import Tile, QueuedTile
from .snake import Snake
from .game_state import GameState
from .game import Game, TickResult

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'KEY_BINDINGS', 'TICK_RATE',
    'Vector2D',
    'KeyboardEvent',
    'Direction',
    'Tile',
    'QueuedTile',
    'Snake',
    'GameState',
    'Game',
    'TickResult',
]

"""
Registry for autopilot players.
Maps player keys (e.g., 'random', 'scripted') to player classes so the CLIs
can pick one by name.
"""

from typing import Callable, Dict, Optional, Type

from .base import Player


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_scripted_player() -> Type[Player]:
    from .scripted_player import ScriptedPlayer
    return ScriptedPlayer


# Registry: maps player key -> callable that returns the player class
PLAYER_VARIANT_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "random": _get_random_player,
    "scripted": _get_scripted_player,
}

# Canonical list of available player keys
AVAILABLE_VARIANTS = list(PLAYER_VARIANT_LOADERS.keys())


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        variant_key: One of 'random' or 'scripted'. If None or empty, returns the random player.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = "random"

    variant_key = variant_key.strip()

    if variant_key not in PLAYER_VARIANT_LOADERS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player '{variant_key}'. Available players: {available}"
        )

    return PLAYER_VARIANT_LOADERS[variant_key]()


def list_variants() -> list:
    """
    Return metadata about all available players.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "random", "description": "Random keys that avoid the snake's own tail"},
        {"key": "scripted", "description": "Replays a fixed key script, one key per tick"},
    ]

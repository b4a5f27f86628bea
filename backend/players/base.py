"""
Base player interface for autopilot input.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current game state once per tick and returns the
    key it would press, standing in for a human at the keyboard.
    """

    name = "player"

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a key to press given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of 'w', 'a', 's', 'd', or None to press nothing this tick
        """
        raise NotImplementedError

"""
Base input source interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class InputSource:
    """
    Base class/interface for anything that feeds commands to a game.

    An input source is polled once per tick and may answer with a direction
    ("UP", "DOWN", "LEFT", "RIGHT"), a lifecycle command ("start", "pause",
    "play"), or None to leave the game alone.
    """

    def get_command(self, game_state: GameState) -> Optional[str]:
        """
        Return the next command given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A direction, a lifecycle command, or None
        """
        raise NotImplementedError

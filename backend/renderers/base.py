"""
Base renderer interface for the game engine.
"""

from domain.game_state import GameState


class Renderer:
    """
    Base class/interface for drawing surfaces.

    A renderer reads GameState snapshots and must never mutate the game.
    """

    def draw(self, game_state: GameState):
        """Redraw the board from `game_state`."""
        raise NotImplementedError

    def show_message(self, text: str):
        """Replace the board with a terminal message ("game over", "you win")."""
        raise NotImplementedError

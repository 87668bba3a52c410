"""
Console renderer - prints the board as text.
"""

import sys

from domain.game_state import GameState
from .base import Renderer


class ConsoleRenderer(Renderer):
    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def draw(self, game_state: GameState):
        header = (
            f"tick {game_state.tick_number}  score {game_state.score}  "
            f"speed {game_state.speed}ms  [{game_state.status}]"
        )
        self.stream.write("\n" + header + "\n" + game_state.print_board() + "\n")
        self.stream.flush()

    def show_message(self, text: str):
        self.stream.write(f"\n*** {text} ***\n")
        self.stream.flush()

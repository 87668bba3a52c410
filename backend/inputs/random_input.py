"""
Random input implementation - picks random safe directions.
"""

import random
from typing import List, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, OPPOSITE_DIRECTION
from domain.game_state import GameState
from .base import InputSource


class RandomInput(InputSource):
    """
    Picks a direction that avoids walls and the snake's own body. Used for
    unattended demo runs of the terminal game.
    """

    def __init__(self, rng=None):
        self.rng = rng or random

    def get_command(self, game_state: GameState) -> Optional[str]:
        snake_positions = game_state.snake_path
        # The tail only moves out of the way when the snake is at full length
        if len(snake_positions) >= game_state.score:
            body = snake_positions[1:]
        else:
            body = snake_positions
        head_x, head_y = game_state.snake_head

        # Calculate all possible next positions
        possible_moves = {
            UP:    (head_x, head_y - 1),  # Up => y - 1
            DOWN:  (head_x, head_y + 1),  # Down => y + 1
            LEFT:  (head_x - 1, head_y),
            RIGHT: (head_x + 1, head_y)
        }

        # Filter out moves that:
        # 1. Reverse the current heading (the game would ignore them)
        # 2. Hit walls
        # 3. Hit own body (except a tail that is about to move)
        valid_moves: List[str] = []
        for move, (new_x, new_y) in possible_moves.items():
            if OPPOSITE_DIRECTION[move] == game_state.direction:
                continue

            if (new_x < 0 or new_x >= game_state.width or
                new_y < 0 or new_y >= game_state.height):
                continue

            if (new_x, new_y) in body:
                continue

            valid_moves.append(move)

        # If no valid moves, keep heading (we'll die anyway)
        if not valid_moves:
            return None

        return self.rng.choice(sorted(valid_moves))

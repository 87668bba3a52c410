"""
Domain entities for the Snake game engine.

This module contains the core game entities that are independent of
rendering, input and timing concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    INACTIVE, ACTIVE, PAUSED, TERMINAL,
    CONTINUE, FOOD_EATEN, GAME_OVER, WON,
)
from .snake import Snake
from .bite import Bite
from .game_state import GameState
from .game import SnakeGame, TickResult, generate_random_bite_position, compute_next_speed

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'INACTIVE', 'ACTIVE', 'PAUSED', 'TERMINAL',
    'CONTINUE', 'FOOD_EATEN', 'GAME_OVER', 'WON',
    'Snake',
    'Bite',
    'GameState',
    'SnakeGame',
    'TickResult',
    'generate_random_bite_position',
    'compute_next_speed',
]

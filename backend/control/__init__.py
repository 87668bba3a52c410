"""
Control layer: wires input, timing and rendering around a SnakeGame.
"""

from .controller import GameController, START_LABEL, RUNNING_LABEL, RESTART_LABEL
from .loop import GameLoop

__all__ = [
    'GameController',
    'GameLoop',
    'START_LABEL',
    'RUNNING_LABEL',
    'RESTART_LABEL',
]

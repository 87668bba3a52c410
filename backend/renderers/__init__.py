"""
Drawing surfaces for the Snake game.
"""

from .base import Renderer
from .console import ConsoleRenderer

__all__ = [
    'Renderer',
    'ConsoleRenderer',
]

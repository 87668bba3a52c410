"""
Input sources for the Snake game.

This module contains the input abstraction and the implementations
that produce direction and lifecycle commands for a game.
"""

from .base import InputSource
from .scripted import ScriptedInput
from .random_input import RandomInput

__all__ = [
    'InputSource',
    'ScriptedInput',
    'RandomInput',
]

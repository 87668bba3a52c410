"""
Bite entity - the food item the snake grows by eating.
"""

from .constants import BITE_COLOR
from .position import Position


class Bite:
    """A single food cell. Relocated with `set` whenever it is eaten."""

    def __init__(self, x: int, y: int, color: str = BITE_COLOR):
        self.position: Position = (x, y)
        self.color = color

    def set(self, x: int, y: int):
        self.position = (x, y)

    def __repr__(self):
        return f"<Bite position={self.position}>"

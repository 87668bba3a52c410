"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Deque, List, Optional

from .constants import RIGHT, VALID_MOVES, OPPOSITE_DIRECTION, SNAKE_COLOR
from .position import Position, shift, is_on_grid


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        path: deque of (x, y) from tail at index 0 to head at the end
        direction: current heading, kept between ticks until changed
        score: maximum length of the path (starts at 1)
        color: display colour handed to the renderer
    """

    def __init__(self, x: int, y: int, color: str = SNAKE_COLOR, score: int = 1,
                 direction: str = RIGHT):
        if score < 1:
            raise ValueError(f"Snake score must be at least 1, got {score}")
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction '{direction}'")
        self.color = color
        self.direction = direction
        self.score = score
        self.path: Deque[Position] = deque([(x, y)])

    @classmethod
    def from_path(cls, path: List[Position], direction: str = RIGHT,
                  score: Optional[int] = None, color: str = SNAKE_COLOR) -> "Snake":
        """
        Build a snake that already occupies `path` (tail first, head last).

        The score defaults to the path length so the next move keeps the
        snake the same size.
        """
        if not path:
            raise ValueError("Snake path must contain at least one position")
        if score is None:
            score = len(path)
        if len(path) > score:
            raise ValueError(f"Path of length {len(path)} exceeds score {score}")
        snake = cls(path[0][0], path[0][1], color=color, score=score, direction=direction)
        snake.path = deque(tuple(p) for p in path)
        return snake

    @property
    def head(self) -> Position:
        """Return the head position (last element)."""
        return self.path[-1]

    def increment_score(self):
        self.score += 1

    def get_score(self) -> int:
        return self.score

    # utils

    def cross_border(self, width: int, height: int) -> bool:
        return not is_on_grid(self.head, width, height)

    def bite_tail(self) -> bool:
        """
        True when the head shares a cell with another part of the path.

        The new head is already in the path when this runs, so a single
        duplicate of the head means the snake ran into itself.
        """
        if len(self.path) > 1:
            return self.path.count(self.head) > 1
        return False

    def check_for_collision(self, position: Position) -> bool:
        return self.head == tuple(position)

    def is_direction_opposite(self, direction: str) -> bool:
        return OPPOSITE_DIRECTION.get(direction) == self.direction

    def calc_position(self, direction: str) -> Position:
        return shift(self.head, direction)

    def set_direction(self, direction: str) -> bool:
        """
        Change heading unless `direction` reverses the current one.

        Returns:
            True if the heading was accepted, False for a rejected reversal.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction '{direction}'. Expected one of {sorted(VALID_MOVES)}")
        if self.is_direction_opposite(direction):
            return False
        self.direction = direction
        return True

    def move(self) -> Position:
        # set new position and add to path
        position = self.calc_position(self.direction)
        self.path.append(position)
        while len(self.path) > self.score:
            self.path.popleft()
        return position

    def __repr__(self):
        return f"<Snake head={self.head}, direction={self.direction}, score={self.score}>"

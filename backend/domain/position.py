"""
Grid positions and one-unit moves.

Coordinates are screen coordinates: (0, 0) is the top-left cell, x grows to
the right and y grows downwards, so UP decreases y.
"""

from typing import List, Tuple

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES

Position = Tuple[int, int]

DELTAS = {
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
    UP:    (0, -1),  # Up => y - 1
    DOWN:  (0, 1),   # Down => y + 1
}


def shift(position: Position, direction: str) -> Position:
    """Return `position` moved by exactly one grid unit in `direction`."""
    if direction not in VALID_MOVES:
        raise ValueError(f"Unknown direction '{direction}'. Expected one of {sorted(VALID_MOVES)}")
    dx, dy = DELTAS[direction]
    x, y = position
    return (x + dx, y + dy)


def is_on_grid(position: Position, width: int, height: int) -> bool:
    x, y = position
    return 0 <= x < width and 0 <= y < height


def all_cells(width: int, height: int) -> List[Position]:
    """Every cell of a width x height grid, column by column."""
    return [(x, y) for x in range(width) for y in range(height)]

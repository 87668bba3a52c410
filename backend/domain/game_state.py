"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Dict, Any, Optional


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Renderers only ever see this object, never the live Snake or Bite.

    Attributes:
        tick_number: how many moves have been applied (0-based)
        status: INACTIVE, ACTIVE, PAUSED or TERMINAL
        snake_path: list of (x, y) from tail to head
        snake_color: display colour of the snake
        direction: current heading of the snake
        score: current snake score
        bite: (x, y) of the food item, None before the game starts
        bite_color: display colour of the food item
        speed: current tick interval in milliseconds
        width, height: board dimensions
        message: terminal message to display, if the game has ended
    """

    def __init__(
        self,
        tick_number: int,
        status: str,
        snake_path: List[Tuple[int, int]],
        snake_color: str,
        direction: str,
        score: int,
        bite: Optional[Tuple[int, int]],
        bite_color: str,
        speed: int,
        width: int,
        height: int,
        message: Optional[str] = None
    ):
        self.tick_number = tick_number
        self.status = status
        self.snake_path = snake_path
        self.snake_color = snake_color
        self.direction = direction
        self.score = score
        self.bite = bite
        self.bite_color = bite_color
        self.speed = speed
        self.width = width
        self.height = height
        self.message = message

    @property
    def snake_head(self) -> Tuple[int, int]:
        return self.snake_path[-1]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        B = bite
        S = snake body
        H = snake head
        Rows run top to bottom, matching screen coordinates, with x-axis
        labels at the bottom. Cells outside the board are not drawn.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.bite is not None:
            bx, by = self.bite
            if 0 <= bx < self.width and 0 <= by < self.height:
                board[by][bx] = 'B'

        last = len(self.snake_path) - 1
        for pos_idx, (x, y) in enumerate(self.snake_path):
            if not (0 <= x < self.width and 0 <= y < self.height):
                continue
            board[y][x] = 'H' if pos_idx == last else 'S'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-friendly representation. Tuples become lists, as json.dumps
        would produce anyway.
        """
        return {
            "tick_number": self.tick_number,
            "status": self.status,
            "snake": {
                "path": [list(p) for p in self.snake_path],
                "color": self.snake_color,
                "direction": self.direction,
                "score": self.score,
            },
            "bite": {
                "position": list(self.bite) if self.bite is not None else None,
                "color": self.bite_color,
            },
            "speed": self.speed,
            "width": self.width,
            "height": self.height,
            "message": self.message,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, status={self.status}, "
            f"head={self.snake_head}, bite={self.bite}, score={self.score}>"
        )

"""
Game orchestrator: owns one Snake and one Bite and advances them one tick
at a time.

The orchestrator never sleeps or schedules anything itself. `step()` applies
one tick and returns a TickResult carrying the outcome and the interval the
caller should wait before the next tick; the control layer owns the timer.
"""

import logging
import random
import uuid
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from .bite import Bite
from .constants import (
    MAX_X, MAX_Y, MIN_SPEED, SPEED_FLOOR, SPEED_STEP,
    VALID_MOVES, BITE_COLOR, SNAKE_COLOR,
    INACTIVE, ACTIVE, PAUSED, TERMINAL,
    CONTINUE, FOOD_EATEN, GAME_OVER, WON,
    DEATH_WALL, DEATH_SELF,
    GAME_OVER_MESSAGE, WIN_MESSAGE,
)
from .game_state import GameState
from .position import Position, all_cells, is_on_grid
from .snake import Snake


logger = logging.getLogger(__name__)


@dataclass
class TickResult:
    outcome: str
    next_interval: Optional[int]
    state: GameState
    moved: bool = True
    death_reason: Optional[str] = None

    @property
    def terminal(self) -> bool:
        return self.next_interval is None


def generate_random_bite_position(
    excluded: Iterable[Position],
    width: int,
    height: int,
    rng=random,
) -> Optional[Position]:
    """
    Pick a free cell uniformly at random.

    Args:
        excluded: cells that must not be chosen (usually the snake path)
        width, height: board dimensions
        rng: anything with a `choice` method; defaults to the random module

    Returns:
        An (x, y) tuple, or None when every cell is excluded (board full).
    """
    taken = set(tuple(p) for p in excluded)
    candidates = [cell for cell in all_cells(width, height) if cell not in taken]
    if not candidates:
        return None
    return rng.choice(candidates)


def compute_next_speed(interval: int, floor: int = SPEED_FLOOR, step: int = SPEED_STEP) -> int:
    """Shrink the tick interval by `step`, never going below `floor`."""
    if interval > floor:
        return max(interval - step, floor)
    return interval


class SnakeGame:
    """
    Manages:
      - Board (width, height)
      - The snake and its bite
      - Lifecycle (INACTIVE -> ACTIVE <-> PAUSED -> TERMINAL)
      - Tick interval (speed), shortened every time a bite is eaten

    A finished game is never reset; build a new SnakeGame to play again.
    """

    def __init__(
        self,
        width: int = MAX_X,
        height: int = MAX_Y,
        speed: int = MIN_SPEED,
        snake: Optional[Snake] = None,
        bite: Optional[Bite] = None,
        on_complete: Optional[Callable[["SnakeGame"], None]] = None,
        rng=None,
        game_id: Optional[str] = None,
    ):
        if not isinstance(width, int) or not isinstance(height, int) or width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive integers, got {width}x{height}")
        if width * height < 2:
            raise ValueError(f"Grid {width}x{height} leaves no room for a bite")
        if speed is None or speed <= 0:
            raise ValueError(f"Speed must be a positive interval, got {speed}")

        self.width = width
        self.height = height
        self.speed = speed
        self.rng = rng or random
        self.game_id = game_id or str(uuid.uuid4())

        self.status = INACTIVE
        self.tick_number = 0
        self.outcome: Optional[str] = None
        self.death_reason: Optional[str] = None

        if snake is None:
            snake = Snake(
                self.rng.randrange(max(width // 2, 1)),
                self.rng.randrange(max(height // 2, 1)),
                color=SNAKE_COLOR,
            )
        elif not is_on_grid(snake.head, width, height):
            raise ValueError(f"Snake head {snake.head} is outside the {width}x{height} grid")
        self.snake = snake

        # The first bite is placed by start() unless one is handed in.
        if bite is not None:
            if not is_on_grid(bite.position, width, height):
                raise ValueError(f"Bite {bite.position} is outside the {width}x{height} grid")
            if bite.position in snake.path:
                raise ValueError(f"Bite {bite.position} sits on the snake")
        self.bite = bite

        self._complete_listeners: List[Callable[["SnakeGame"], None]] = []
        if on_complete is not None:
            self._complete_listeners.append(on_complete)

        logger.debug(f"Created game {self.game_id} on a {width}x{height} grid at speed {speed}")

    # -- state ---------------------------------------------------------

    @property
    def active(self) -> bool:
        return self.status == ACTIVE

    @property
    def finished(self) -> bool:
        return self.status == TERMINAL

    @property
    def message(self) -> Optional[str]:
        if self.outcome == GAME_OVER:
            return GAME_OVER_MESSAGE
        if self.outcome == WON:
            return WIN_MESSAGE
        return None

    def add_complete_listener(self, listener: Callable[["SnakeGame"], None]):
        self._complete_listeners.append(listener)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            status=self.status,
            snake_path=list(self.snake.path),
            snake_color=self.snake.color,
            direction=self.snake.direction,
            score=self.snake.score,
            bite=self.bite.position if self.bite else None,
            bite_color=self.bite.color if self.bite else BITE_COLOR,
            speed=self.speed,
            width=self.width,
            height=self.height,
            message=self.message,
        )

    # -- commands ------------------------------------------------------

    def input_direction(self, direction: str) -> bool:
        """
        Queue a heading change for the next tick. The latest accepted
        direction wins; reversals are dropped by the snake.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction '{direction}'. Expected one of {sorted(VALID_MOVES)}")
        if self.finished:
            logger.debug(f"Game {self.game_id} is over, ignoring direction {direction}")
            return False
        accepted = self.snake.set_direction(direction)
        if not accepted:
            logger.debug(f"Ignoring reversal {direction} while heading {self.snake.direction}")
        return accepted

    def generate_random_bite_position(self, excluded: Iterable[Position]) -> Optional[Position]:
        return generate_random_bite_position(excluded, self.width, self.height, rng=self.rng)

    def start(self) -> Optional[int]:
        """
        Place the first bite and begin ticking.

        Returns:
            The interval before the first tick, or None if the game had
            already been started.
        """
        if self.status != INACTIVE:
            logger.warning(f"Game {self.game_id} already started (status {self.status}), ignoring start")
            return None

        if self.bite is None:
            position = self.generate_random_bite_position(self.snake.path)
            if position is None:
                # Only reachable with an injected snake that fills the board.
                return self._finish(WON, None).next_interval
            self.bite = Bite(position[0], position[1], color=BITE_COLOR)

        self.status = ACTIVE
        logger.info(f"Game {self.game_id} started: snake at {self.snake.head}, bite at {self.bite.position}")
        return self.speed

    def pause(self):
        if self.status == ACTIVE:
            self.status = PAUSED
            logger.info(f"Game {self.game_id} paused at tick {self.tick_number}")
        elif self.status != PAUSED:
            logger.warning(f"Cannot pause game {self.game_id} in status {self.status}")

    def play(self):
        if self.status == PAUSED:
            self.status = ACTIVE
            logger.info(f"Game {self.game_id} resumed at tick {self.tick_number}")
        elif self.status != ACTIVE:
            logger.warning(f"Cannot resume game {self.game_id} in status {self.status}")

    # -- ticking -------------------------------------------------------

    def step(self) -> TickResult:
        """
        Execute one tick:
          1) If the game is over, report the final outcome again
          2) If inactive or paused, change nothing and keep the cadence
          3) Move the snake one cell
          4) Border / self collision ends the game
          5) Eating the bite grows the snake, moves the bite, speeds up
        """
        if self.status == TERMINAL:
            return self._result(self.outcome, None, moved=False)
        if self.status != ACTIVE:
            return self._result(CONTINUE, self.speed, moved=False)

        self.snake.move()
        self.tick_number += 1

        if self.snake.cross_border(self.width, self.height):
            return self._finish(GAME_OVER, DEATH_WALL)
        if self.snake.bite_tail():
            return self._finish(GAME_OVER, DEATH_SELF)

        if self.snake.check_for_collision(self.bite.position):
            self.snake.increment_score()
            position = self.generate_random_bite_position(self.snake.path)
            if position is None:
                return self._finish(WON, None)
            self.bite.set(*position)
            self.speed = compute_next_speed(self.speed)
            logger.debug(f"Bite eaten, score {self.snake.score}, next bite at {position}, speed {self.speed}")
            return self._result(FOOD_EATEN, self.speed)

        return self._result(CONTINUE, self.speed)

    run_tick = step

    def _result(self, outcome: str, next_interval: Optional[int], moved: bool = True) -> TickResult:
        return TickResult(
            outcome=outcome,
            next_interval=next_interval,
            state=self.get_current_state(),
            moved=moved,
            death_reason=self.death_reason,
        )

    def _finish(self, outcome: str, reason: Optional[str]) -> TickResult:
        self.status = TERMINAL
        self.outcome = outcome
        self.death_reason = reason
        if outcome == WON:
            logger.info(f"Game {self.game_id} won: board full with score {self.snake.score} after {self.tick_number} ticks")
        else:
            logger.info(f"Game {self.game_id} over ({reason}) with score {self.snake.score} after {self.tick_number} ticks")

        result = self._result(outcome, None)
        for listener in self._complete_listeners:
            listener(self)
        return result

    def __repr__(self):
        return f"<SnakeGame {self.game_id} status={self.status}, tick={self.tick_number}, score={self.snake.score}>"

"""
Button and keyboard wiring for a single board.

The controller owns the "current" SnakeGame. When a game completes it is
discarded and a fresh one is built from the factory, so the next start
command begins a new playthrough.
"""

import logging
from typing import Callable, Optional

from domain.constants import (
    VALID_MOVES, KEY_BINDINGS,
    START, PAUSE, PLAY,
    INACTIVE,
)
from domain.game import SnakeGame


logger = logging.getLogger(__name__)

START_LABEL = "start"
RUNNING_LABEL = "running"
RESTART_LABEL = "restart"


class GameController:
    def __init__(self, game_factory: Callable[[], SnakeGame]):
        self.game_factory = game_factory
        self.game = game_factory()
        self.finished_games = []
        self.start_label = START_LABEL

    @property
    def start_enabled(self) -> bool:
        return self.start_label != RUNNING_LABEL

    def handle_command(self, command: str) -> bool:
        """
        Dispatch a direction or lifecycle command to the current game.

        Returns:
            False if the command was not recognised, True otherwise.
        """
        if command in VALID_MOVES:
            self.game.input_direction(command)
        elif command == START:
            self.start()
        elif command == PAUSE:
            self.game.pause()
        elif command == PLAY:
            self.game.play()
        else:
            logger.warning(f"Ignoring unknown command '{command}'")
            return False
        return True

    def handle_key(self, key: str) -> bool:
        """Translate a KeyboardEvent key name; unmapped keys are ignored."""
        direction = KEY_BINDINGS.get(key)
        if direction is None:
            return False
        self.game.input_direction(direction)
        return True

    def start(self) -> Optional[int]:
        if not self.start_enabled or self.game.status != INACTIVE:
            logger.warning(f"Start pressed while game {self.game.game_id} is {self.game.status}")
            return None

        self.game.add_complete_listener(self._on_complete)
        self.start_label = RUNNING_LABEL
        return self.game.start()

    def _on_complete(self, game: SnakeGame):
        logger.info(f"Game {game.game_id} complete: {game.message}")
        self.finished_games.append(game)
        self.start_label = RESTART_LABEL
        self.game = self.game_factory()

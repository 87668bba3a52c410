"""
Timer side of the game: steps the current game, redraws, and waits for
the interval the game asks for before the next tick.
"""

import logging
import time
from typing import Callable, List, Optional

from domain.game import TickResult
from inputs.base import InputSource
from renderers.base import Renderer
from .controller import GameController


logger = logging.getLogger(__name__)


class GameLoop:
    """
    Re-arms itself after every tick, so the wait shrinks as the game speeds
    up. Paused games keep ticking at their current speed without moving.

    Attributes:
        controller: owns the game being played
        renderer: drawing surface, may be None for headless runs
        input_source: polled once per tick, may be None
        sleep: blocking wait taking seconds; time.sleep by default
    """

    def __init__(
        self,
        controller: GameController,
        renderer: Optional[Renderer] = None,
        input_source: Optional[InputSource] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.controller = controller
        self.renderer = renderer
        self.input_source = input_source
        self.sleep = sleep

    def play_game(self, max_ticks: Optional[int] = None) -> Optional[TickResult]:
        """
        Start the controller's current game and tick it until it ends.

        Returns:
            The terminal TickResult, or the last result if `max_ticks` ran out
            first (None if the game could not be started).
        """
        game = self.controller.game
        interval = self.controller.start()
        if game.finished:
            self._show_end(game)
            return game.step()
        if interval is None:
            return None

        if self.renderer:
            self.renderer.draw(game.get_current_state())

        result = None
        ticks = 0
        while True:
            self.sleep(interval / 1000.0)

            if self.input_source is not None:
                command = self.input_source.get_command(game.get_current_state())
                if command is not None:
                    self.controller.handle_command(command)

            result = game.step()
            ticks += 1

            if result.terminal:
                self._show_end(game)
                return result

            if self.renderer and result.moved:
                self.renderer.draw(result.state)
            interval = result.next_interval

            if max_ticks is not None and ticks >= max_ticks:
                logger.warning(f"Stopping game {game.game_id} after {ticks} ticks without an ending")
                return result

    def run(self, games: int = 1, max_ticks: Optional[int] = None) -> List[TickResult]:
        """Play `games` consecutive games, restarting after each one ends."""
        results = []
        for _ in range(games):
            result = self.play_game(max_ticks=max_ticks)
            if result is None:
                break
            results.append(result)
            if not result.terminal:
                break
        return results

    def _show_end(self, game):
        if self.renderer and game.message:
            self.renderer.show_message(game.message)

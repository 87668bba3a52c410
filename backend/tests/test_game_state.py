"""
Tests for the GameState snapshot handed to renderers.
"""

import json
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.bite import Bite
from domain.game import SnakeGame
from domain.game_state import GameState
from domain.snake import Snake


def make_state(**overrides):
    values = dict(
        tick_number=3,
        status="ACTIVE",
        snake_path=[(1, 1), (2, 1), (3, 1)],
        snake_color="#00ff00",
        direction="RIGHT",
        score=3,
        bite=(0, 2),
        bite_color="#4C0062",
        speed=610,
        width=5,
        height=4,
    )
    values.update(overrides)
    return GameState(**values)


class TestGameState:
    """Tests for the GameState class."""

    def test_snake_head_is_last_cell(self):
        assert make_state().snake_head == (3, 1)

    def test_print_board_marks_cells(self):
        lines = make_state().print_board().split("\n")

        # Four rows plus the axis labels
        assert len(lines) == 5
        assert lines[1] == " 1 . S S H ."
        assert lines[2] == " 2 B . . . ."
        assert lines[-1] == "   0 1 2 3 4"

    def test_print_board_skips_off_grid_head(self):
        board = make_state(snake_path=[(3, 1), (4, 1), (5, 1)]).print_board()
        assert "H" not in board
        assert board.count("S") == 2

    def test_print_board_without_bite(self):
        board = make_state(bite=None).print_board()
        assert "B" not in board

    def test_to_dict_is_json_friendly(self):
        data = make_state(message="game over").to_dict()
        encoded = json.loads(json.dumps(data))

        assert encoded["snake"]["path"] == [[1, 1], [2, 1], [3, 1]]
        assert encoded["snake"]["score"] == 3
        assert encoded["bite"]["position"] == [0, 2]
        assert encoded["speed"] == 610
        assert encoded["message"] == "game over"

    def test_repr(self):
        repr_str = repr(make_state())
        assert "tick=3" in repr_str
        assert "score=3" in repr_str

    def test_snapshot_is_detached_from_game(self):
        """Moving the snake after taking a snapshot leaves the snapshot alone."""
        game = SnakeGame(snake=Snake(2, 2), bite=Bite(8, 8))
        game.start()
        state = game.get_current_state()
        game.step()

        assert state.snake_path == [(2, 2)]
        assert game.get_current_state().snake_path == [(3, 2)]

"""
Tests for the input sources.
"""

import pytest
import random
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.game_state import GameState
from inputs import InputSource, ScriptedInput, RandomInput


def make_state(path, direction=RIGHT, score=None, width=10, height=10):
    return GameState(
        tick_number=0,
        status="ACTIVE",
        snake_path=path,
        snake_color="#00ff00",
        direction=direction,
        score=score if score is not None else len(path),
        bite=(9, 9),
        bite_color="#4C0062",
        speed=650,
        width=width,
        height=height,
    )


class TestInputSource:
    def test_base_class_is_abstract(self):
        with pytest.raises(NotImplementedError):
            InputSource().get_command(make_state([(0, 0)]))


class TestScriptedInput:
    """Tests for ScriptedInput."""

    def test_replays_in_order_then_runs_dry(self):
        source = ScriptedInput([UP, None, "pause"])
        state = make_state([(5, 5)])

        assert source.get_command(state) == UP
        assert source.get_command(state) is None
        assert source.get_command(state) == "pause"
        assert source.exhausted is True
        assert source.get_command(state) is None

    def test_parse(self):
        source = ScriptedInput.parse("up, -, LEFT,,Pause,play")
        assert source.commands == [UP, None, LEFT, None, "pause", "play"]


class TestRandomInput:
    """Tests for RandomInput."""

    def test_avoids_walls_in_corner(self):
        source = RandomInput(rng=random.Random(0))
        state = make_state([(0, 0)], direction=RIGHT)
        for _ in range(50):
            assert source.get_command(state) in {RIGHT, DOWN}

    def test_never_reverses(self):
        source = RandomInput(rng=random.Random(1))
        state = make_state([(5, 5)], direction=LEFT)
        for _ in range(50):
            assert source.get_command(state) != RIGHT

    def test_avoids_own_body(self):
        source = RandomInput(rng=random.Random(2))
        # Head at (2, 1) heading UP; LEFT runs into the body.
        state = make_state([(0, 1), (1, 1), (1, 2), (2, 2), (2, 1)], direction=UP)
        for _ in range(50):
            assert source.get_command(state) in {UP, RIGHT}

    def test_tail_is_safe_at_full_length(self):
        source = RandomInput(rng=random.Random(3))
        state = make_state([(2, 0), (1, 0), (1, 1), (2, 1)], direction=RIGHT, score=4)
        seen = {source.get_command(state) for _ in range(100)}
        assert seen == {UP, DOWN, RIGHT}

    def test_tail_is_unsafe_while_growing(self):
        """A growing snake keeps its tail, so the tail cell is blocked."""
        source = RandomInput(rng=random.Random(4))
        state = make_state([(2, 0), (1, 0), (1, 1), (2, 1)], direction=RIGHT, score=6)
        for _ in range(50):
            assert source.get_command(state) in {DOWN, RIGHT}

    def test_trapped_snake_keeps_heading(self):
        source = RandomInput()
        state = make_state([(0, 0)], direction=RIGHT, width=1, height=1)
        assert source.get_command(state) is None

"""
Scripted input - replays a fixed list of commands, one per tick.
"""

from typing import Iterable, Optional

from domain.game_state import GameState
from .base import InputSource


class ScriptedInput(InputSource):
    """
    Replays commands in order. None entries skip a tick; once the script
    runs out every poll returns None.
    """

    def __init__(self, commands: Iterable[Optional[str]]):
        self.commands = list(commands)
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.commands)

    def get_command(self, game_state: GameState) -> Optional[str]:
        if self.exhausted:
            return None
        command = self.commands[self.position]
        self.position += 1
        return command

    @classmethod
    def parse(cls, text: str) -> "ScriptedInput":
        """
        Build a script from a comma separated string such as
        "UP,UP,-,LEFT". A '-' (or an empty entry) skips a tick.
        Directions are upper-cased, lifecycle commands lower-cased.
        """
        commands = []
        for raw in text.split(","):
            item = raw.strip()
            if not item or item == "-":
                commands.append(None)
            elif item.upper() in {"UP", "DOWN", "LEFT", "RIGHT"}:
                commands.append(item.upper())
            else:
                commands.append(item.lower())
        return cls(commands)

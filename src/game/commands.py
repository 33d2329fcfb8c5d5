"""Discrete player commands accepted by the game."""
from enum import Enum, auto
from typing import Dict, Tuple


class Command(Enum):
    """One player action, decoded from a key press."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    TOGGLE_FLAG = auto()
    REVEAL = auto()
    QUIT = auto()

    @property
    def is_move(self) -> bool:
        return self in MOVE_DELTAS


# (row, col) step for each cursor command
MOVE_DELTAS: Dict[Command, Tuple[int, int]] = {
    Command.MOVE_UP: (-1, 0),
    Command.MOVE_DOWN: (1, 0),
    Command.MOVE_LEFT: (0, -1),
    Command.MOVE_RIGHT: (0, 1),
}

"""
Key translation for the terminal front end.

Maps curses key codes, and the characters of a replay script, to game
commands.
"""
import curses
from typing import Dict, Iterator, Optional

from game import Command


KEY_BINDINGS: Dict[int, Command] = {
    curses.KEY_UP: Command.MOVE_UP,
    curses.KEY_DOWN: Command.MOVE_DOWN,
    curses.KEY_LEFT: Command.MOVE_LEFT,
    curses.KEY_RIGHT: Command.MOVE_RIGHT,
    ord("f"): Command.TOGGLE_FLAG,
    ord("F"): Command.TOGGLE_FLAG,
    ord("r"): Command.REVEAL,
    ord("R"): Command.REVEAL,
    ord("q"): Command.QUIT,
    ord("Q"): Command.QUIT,
}

SCRIPT_BINDINGS: Dict[str, Command] = {
    "^": Command.MOVE_UP,
    "v": Command.MOVE_DOWN,
    "<": Command.MOVE_LEFT,
    ">": Command.MOVE_RIGHT,
    "f": Command.TOGGLE_FLAG,
    "r": Command.REVEAL,
    "q": Command.QUIT,
}


def command_for_key(key: int) -> Optional[Command]:
    """
    Translate one ``getch`` result.

    Returns None for a poll timeout (``-1``) and for unbound keys.
    """
    return KEY_BINDINGS.get(key)


def parse_script(script: str) -> Iterator[Command]:
    """
    Decode a replay script into commands, skipping whitespace.

    Raises:
        ValueError: On a character with no binding.
    """
    for position, char in enumerate(script):
        if char.isspace():
            continue
        try:
            yield SCRIPT_BINDINGS[char]
        except KeyError:
            raise ValueError(
                f"Unknown command {char!r} at position {position}"
            ) from None

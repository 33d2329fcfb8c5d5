"""
Session loops for terminal Minesweeper.

``play`` runs the interactive curses loop; ``replay`` feeds a fixed command
sequence to a game without a terminal.
"""
import curses
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from game import Command, Game, GameSnapshot

from .keys import command_for_key
from .render import draw

logger = logging.getLogger(__name__)


@dataclass
class AppConfig:
    """
    Settings for the interactive loop.

    Attributes:
        poll_timeout_ms: How long each poll waits for a key before the
            frame is redrawn without a command.
    """

    poll_timeout_ms: int = 50

    def __post_init__(self) -> None:
        if self.poll_timeout_ms <= 0:
            raise ValueError("Poll timeout must be positive")


def run(stdscr: "curses.window", game: Game, config: AppConfig) -> GameSnapshot:
    """
    Draw, poll, step until the quit key.

    At most one command is applied per poll. The loop keeps running after
    the game is won or lost so the final board stays on screen.

    Returns:
        The snapshot on quit.
    """
    curses.curs_set(0)
    stdscr.keypad(True)
    stdscr.timeout(config.poll_timeout_ms)

    snapshot = game.snapshot()
    while True:
        draw(stdscr, snapshot)
        command = command_for_key(stdscr.getch())
        snapshot = game.step(command)
        if command is Command.QUIT:
            return snapshot


def play(game: Game, config: Optional[AppConfig] = None) -> GameSnapshot:
    """
    Run an interactive session on the real terminal.

    ``curses.wrapper`` restores the terminal on every exit path. Ctrl-C is
    treated like the quit key.
    """
    config = config or AppConfig()
    logger.info(
        "Starting session: %dx%d board, %d mines",
        game.board.side, game.board.side, game.board.mines,
    )
    try:
        snapshot = curses.wrapper(run, game, config)
    except KeyboardInterrupt:
        snapshot = game.snapshot()
    logger.info(
        "Session ended: over=%s won=%s flagged=%d",
        snapshot.is_over, snapshot.is_won, snapshot.flagged,
    )
    return snapshot


def replay(game: Game, commands: Iterable[Command]) -> GameSnapshot:
    """Apply commands in order, stopping after a quit, and return the last state."""
    snapshot = game.snapshot()
    for command in commands:
        snapshot = game.step(command)
        if command is Command.QUIT:
            break
    return snapshot

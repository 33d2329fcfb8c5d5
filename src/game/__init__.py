"""
Minesweeper game module.

Provides the board and session engine: cells, mine placement, reveal and
chord algorithms, and the command state machine.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, BEGINNER
from .commands import Command
from .game import Game, GameSnapshot

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "Command",
    "Game",
    "GameSnapshot",
]

"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import Board, BoardConfig, Cell, Game


# ============================================================================
# Layout Helpers
# ============================================================================

def game_from_layout(rows: List[str]) -> Game:
    """
    Build a game whose mines are already placed.

    Each string is one row; ``*`` is a mine, anything else is safe. The
    first-reveal deferral is switched off so reveals use this layout.
    """
    side = len(rows)
    assert all(len(row) == side for row in rows), "layout must be square"
    mines = sum(row.count("*") for row in rows)

    game = Game(BoardConfig(side, mines))
    for row, line in enumerate(rows):
        for col, char in enumerate(line):
            if char == "*":
                game.board.get_cell(row, col).is_mine = True
    game.board.update_adjacent_mines()
    game.first_reveal = False
    return game


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def make_game() -> Callable[[List[str]], Game]:
    """Factory for games with a fixed mine layout."""
    return game_from_layout


@pytest.fixture
def default_game() -> Game:
    """A fresh 9x9 game with 10 mines."""
    return Game(BoardConfig(9, 10, seed=1234))


@pytest.fixture
def empty_game() -> Game:
    """A 5x5 game without mines for cascade testing."""
    return Game(BoardConfig(5, 0))


@pytest.fixture
def wall_game() -> Game:
    """
    A vertical wall of mines in column 2.

    Columns 0-1 form a closed region on the left, columns 3-4 on the right.
    """
    return game_from_layout([
        "..*..",
        "..*..",
        "..*..",
        "..*..",
        "..*..",
    ])


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def seeded_board() -> Board:
    """A 9x9 board with a fixed placement seed."""
    return Board(BoardConfig(9, 10, seed=7))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)

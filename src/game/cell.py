"""
Cell module for terminal Minesweeper.

A cell is one grid position: whether it hides a mine, how many mines
surround it, and what the player currently sees there.
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


class CellState(Enum):
    """What the player sees at a grid position."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single grid position.

    The three visible states are mutually exclusive, which keeps the two
    rules of play structural: a flagged cell is never revealed and a
    revealed cell is never flagged.

    Attributes:
        is_mine: Whether a mine is buried here.
        adjacent_mines: Mines in the surrounding cells (0-8). Only
            meaningful when ``is_mine`` is False.
        state: Hidden, revealed or flagged.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Uncover the cell.

        Returns:
            True if the cell was hidden and is now revealed, False if it was
            already revealed or is protected by a flag.
        """
        if self.state is not CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Put a flag on a hidden cell or take it off a flagged one.

        Returns:
            True if the flag changed, False for a revealed cell.
        """
        if self.state is CellState.REVEALED:
            return False
        if self.state is CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        return self.state is CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state is CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state is CellState.FLAGGED

    def visible_code(self) -> int:
        """
        Encode what the player may see as a small integer.

        Returns:
            -1: hidden
            -2: flagged
            0-8: revealed, adjacent mine count
            9: revealed mine
        """
        if self.state is CellState.HIDDEN:
            return HIDDEN_CODE
        if self.state is CellState.FLAGGED:
            return FLAGGED_CODE
        if self.is_mine:
            return MINE_CODE
        return self.adjacent_mines

"""
Board module for terminal Minesweeper.

Owns the square grid of cells, places mines once the safe first cell is
known, and computes neighbour mine counts.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Settings for one board.

    Attributes:
        side: Number of rows and columns.
        num_mines: Mines to place on the first reveal.
        seed: Seed for mine placement, None for a fresh random layout.
    """

    side: int = 9
    num_mines: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Reject sizes that cannot hold the mines plus one safe cell."""
        if self.side < 1:
            raise ValueError("Board side must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.side * self.side - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")


BEGINNER = BoardConfig(9, 10)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Square Minesweeper grid.

    Mines are not placed at construction. ``place_mines`` is called once
    with the first revealed position, then ``update_adjacent_mines`` fills
    in the counts.
    """

    config: BoardConfig = field(default_factory=lambda: BEGINNER)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mines_placed: bool = False
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.config.seed)
        self._grid = [
            [Cell() for _ in range(self.side)]
            for _ in range(self.side)
        ]

    @property
    def side(self) -> int:
        return self.config.side

    @property
    def mines(self) -> int:
        return self.config.num_mines

    @property
    def mines_placed(self) -> bool:
        return self._mines_placed

    # ========================================================================
    # Mine Placement
    # ========================================================================

    def place_mines(self, safe_row: int, safe_col: int) -> None:
        """
        Bury ``mines`` mines anywhere except ``(safe_row, safe_col)``.

        Positions are drawn uniformly; a draw that lands on the safe cell or
        on an existing mine is thrown away and drawn again.

        Raises:
            RuntimeError: If mines were already placed on this board.
        """
        if self._mines_placed:
            raise RuntimeError("Mines have already been placed")

        remaining = self.mines
        while remaining > 0:
            row = self._rng.randrange(self.side)
            col = self._rng.randrange(self.side)
            if (row, col) == (safe_row, safe_col):
                continue
            cell = self._grid[row][col]
            if cell.is_mine:
                continue
            cell.is_mine = True
            remaining -= 1

        self._mines_placed = True
        logger.debug(
            "Placed %d mines on %dx%d board, safe cell (%d, %d)",
            self.mines, self.side, self.side, safe_row, safe_col,
        )

    def update_adjacent_mines(self) -> None:
        """Store the neighbour mine count on every non-mine cell."""
        for row, col, cell in self.cells():
            if cell.is_mine:
                continue
            cell.adjacent_mines = sum(
                1 for r, c in self.neighbors(row, col)
                if self._grid[r][c].is_mine
            )
        logger.debug("Updated adjacent mine counts")

    # ========================================================================
    # Grid Access
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < self.side and 0 <= col < self.side

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Positions in the Moore neighbourhood of ``(row, col)``.

        Positions outside the grid are left out, so corners have three
        neighbours and edges five.
        """
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    result.append((new_row, new_col))
        return result

    def get_cell(self, row: int, col: int) -> Cell:
        return self._grid[row][col]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield ``(row, col, cell)`` for every position, row by row."""
        for row, cells in enumerate(self._grid):
            for col, cell in enumerate(cells):
                yield row, col, cell

    def mine_count(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.is_mine)

    def count_adjacent_flags(self, row: int, col: int) -> int:
        return sum(
            1 for r, c in self.neighbors(row, col)
            if self._grid[r][c].is_flagged
        )

    def get_observation(self) -> np.ndarray:
        """
        Visible state of the grid.

        Returns:
            ``(side, side)`` int8 array, see ``Cell.visible_code``.
        """
        obs = np.zeros((self.side, self.side), dtype=np.int8)
        for row, col, cell in self.cells():
            obs[row, col] = cell.visible_code()
        return obs

"""
Game session module for terminal Minesweeper.

Bundles a Board with the session state (cursor, flag tally, first-reveal
deferral, win/loss flags) and applies player commands to both together.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .board import BEGINNER, Board, BoardConfig, Position
from .commands import MOVE_DELTAS, Command

logger = logging.getLogger(__name__)


# ============================================================================
# Snapshot
# ============================================================================

@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only view of a game handed to renderers.

    Attributes:
        side: Number of rows and columns.
        mines: Total mines on the board.
        flagged: Flags currently placed.
        selected_cell: Cursor position as (row, col).
        is_over: A mine was revealed.
        is_won: The flag count reached the mine count.
        cells: int8 array, -1 hidden, -2 flagged, 0-8 revealed count,
            9 revealed mine.
    """

    side: int
    mines: int
    flagged: int
    selected_cell: Position
    is_over: bool
    is_won: bool
    cells: np.ndarray = field(repr=False)

    @property
    def flags_remaining(self) -> int:
        return self.mines - self.flagged


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    One Minesweeper session.

    Loss and win are passive flags: the game keeps accepting commands after
    either is set, and only the driving loop decides when to stop.

    The win rule is count based. ``is_won`` is set as soon as the number of
    flags equals the number of mines, whether or not the flags sit on mines,
    and it stays set afterwards.
    """

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        self.board = Board(config or BEGINNER)
        self.is_over = False
        self.is_won = False
        self.selected_cell: Position = (0, 0)
        self.flagged = 0
        self.first_reveal = True

    # ========================================================================
    # Reveal Algorithms
    # ========================================================================

    def reveal_cell(self, row: int, col: int) -> bool:
        """
        Reveal a cell, cascading through zero-count regions.

        Revealed and flagged cells are left alone. A mine ends the game and
        stops the reveal. A cell with no neighbouring mines opens all of its
        neighbours under the same rules; a worklist replaces recursion and
        the revealed check keeps any cell from being visited twice.

        Returns:
            True if at least one cell was revealed.
        """
        stack: List[Position] = [(row, col)]
        revealed_any = False

        while stack:
            current_row, current_col = stack.pop()
            cell = self.board.get_cell(current_row, current_col)
            if not cell.reveal():
                continue
            revealed_any = True

            if cell.is_mine:
                self._detonate(current_row, current_col)
                break

            if cell.adjacent_mines == 0:
                stack.extend(
                    (r, c) for r, c in self.board.neighbors(current_row, current_col)
                    if self.board.get_cell(r, c).is_hidden
                )

        return revealed_any

    def reveal_adjacent_cells(self, row: int, col: int) -> bool:
        """
        Chord: open every unflagged neighbour of a satisfied number.

        Only acts on a revealed cell with a nonzero count whose flagged
        neighbours match that count exactly. The flags are trusted, so a
        misplaced flag leaves a mine among the neighbours that get opened.

        Returns:
            True if at least one cell was revealed.
        """
        cell = self.board.get_cell(row, col)
        if not cell.is_revealed or cell.adjacent_mines == 0:
            return False
        if self.board.count_adjacent_flags(row, col) != cell.adjacent_mines:
            return False

        revealed_any = False
        for neighbor_row, neighbor_col in self.board.neighbors(row, col):
            if self.board.get_cell(neighbor_row, neighbor_col).is_flagged:
                continue
            if self.reveal_cell(neighbor_row, neighbor_col):
                revealed_any = True
        return revealed_any

    def _detonate(self, row: int, col: int) -> None:
        if not self.is_over:
            logger.info("Mine revealed at (%d, %d), game over", row, col)
        self.is_over = True

    # ========================================================================
    # Commands
    # ========================================================================

    def move_cursor(self, command: Command) -> bool:
        """
        Step the cursor one cell, staying put at the grid edge.

        Returns:
            True if the cursor moved.
        """
        delta_row, delta_col = MOVE_DELTAS[command]
        row, col = self.selected_cell
        new_row, new_col = row + delta_row, col + delta_col
        if not self.board.is_valid_position(new_row, new_col):
            return False
        self.selected_cell = (new_row, new_col)
        return True

    def toggle_flag(self) -> bool:
        """
        Flag or unflag the selected cell and update the tally.

        Returns:
            True if the flag changed, False on a revealed cell.
        """
        row, col = self.selected_cell
        cell = self.board.get_cell(row, col)
        if not cell.toggle_flag():
            return False

        self.flagged += 1 if cell.is_flagged else -1
        if self.flagged == self.board.mines and not self.is_won:
            self.is_won = True
            logger.info("All %d flags placed, game won", self.flagged)
        return True

    def reveal(self) -> bool:
        """
        Reveal the selected cell, or chord it if already revealed.

        The first reveal of the session places the mines around the cursor
        so that the cell under it is never a mine.

        Returns:
            True if at least one cell was revealed.
        """
        row, col = self.selected_cell
        if self.first_reveal:
            self.first_reveal = False
            self.board.place_mines(row, col)
            self.board.update_adjacent_mines()

        if self.board.get_cell(row, col).is_revealed:
            return self.reveal_adjacent_cells(row, col)
        return self.reveal_cell(row, col)

    def step(self, command: Optional[Command]) -> GameSnapshot:
        """
        Apply one command and return the resulting state.

        ``None`` stands for a poll with no input and changes nothing.
        ``Command.QUIT`` changes nothing either; stopping is up to the caller.
        """
        if command is None or command is Command.QUIT:
            pass
        elif command.is_move:
            self.move_cursor(command)
        elif command is Command.TOGGLE_FLAG:
            self.toggle_flag()
        elif command is Command.REVEAL:
            self.reveal()
        return self.snapshot()

    # ========================================================================
    # State Accessors
    # ========================================================================

    def snapshot(self) -> GameSnapshot:
        cells = self.board.get_observation()
        cells.setflags(write=False)
        return GameSnapshot(
            side=self.board.side,
            mines=self.board.mines,
            flagged=self.flagged,
            selected_cell=self.selected_cell,
            is_over=self.is_over,
            is_won=self.is_won,
            cells=cells,
        )

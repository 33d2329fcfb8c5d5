"""
Unit tests for Board class.

Tests configuration validation, deferred mine placement, adjacency counts
and the visible-state observation.
"""
import pytest
import numpy as np
from game import Board, BoardConfig, BEGINNER


def brute_force_count(board: Board, row: int, col: int) -> int:
    count = 0
    for r in range(row - 1, row + 2):
        for c in range(col - 1, col + 2):
            if (r, c) == (row, col):
                continue
            if 0 <= r < board.side and 0 <= c < board.side:
                count += board.get_cell(r, c).is_mine
    return count


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_beginner_preset(self) -> None:
        """The default preset is 9x9 with 10 mines."""
        assert BEGINNER.side == 9
        assert BEGINNER.num_mines == 10

    def test_zero_side_raises_error(self) -> None:
        """Side of 0 should raise ValueError."""
        with pytest.raises(ValueError, match="side must be positive"):
            BoardConfig(0, 0)

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise ValueError."""
        with pytest.raises(ValueError, match="cannot be negative"):
            BoardConfig(9, -1)

    def test_too_many_mines_raises_error(self) -> None:
        """At least one cell must stay free for the first reveal."""
        with pytest.raises(ValueError, match="Too many mines"):
            BoardConfig(3, 9)

    def test_max_mines_is_valid(self) -> None:
        """side * side - 1 mines is accepted."""
        assert BoardConfig(3, 8).num_mines == 8


# ============================================================================
# Board Initialization Tests
# ============================================================================

class TestBoardInitialization:
    """Test board creation and initial state."""

    def test_board_has_correct_dimensions(self, default_board: Board) -> None:
        """Default board is a 9x9 grid with 10 mines to place."""
        assert default_board.side == 9
        assert default_board.mines == 10
        assert len(list(default_board.cells())) == 81

    def test_new_board_all_cells_blank(self, default_board: Board) -> None:
        """Every cell starts hidden, safe and with a zero count."""
        for _, _, cell in default_board.cells():
            assert cell.is_hidden is True
            assert cell.is_mine is False
            assert cell.adjacent_mines == 0

    def test_mines_not_placed_at_construction(
        self, default_board: Board
    ) -> None:
        """Mines wait for the first reveal."""
        assert default_board.mine_count() == 0
        assert default_board.mines_placed is False


# ============================================================================
# Mine Placement Tests
# ============================================================================

class TestPlaceMines:
    """Test deferred random mine placement."""

    def test_places_exact_mine_count(self, seeded_board: Board) -> None:
        """Exactly the configured number of mines is placed."""
        seeded_board.place_mines(0, 0)
        assert seeded_board.mine_count() == 10
        assert seeded_board.mines_placed is True

    @pytest.mark.parametrize("seed", range(50))
    def test_safe_cell_never_mined(self, seed: int) -> None:
        """The cell of the first reveal is excluded from placement."""
        board = Board(BoardConfig(9, 10, seed=seed))
        board.place_mines(4, 4)
        assert board.get_cell(4, 4).is_mine is False
        assert board.mine_count() == 10

    def test_max_density_leaves_only_safe_cell(self) -> None:
        """With side * side - 1 mines everything but the safe cell is mined."""
        board = Board(BoardConfig(3, 8, seed=3))
        board.place_mines(1, 2)
        for row, col, cell in board.cells():
            assert cell.is_mine is ((row, col) != (1, 2))

    def test_same_seed_same_layout(self) -> None:
        """Placement is reproducible from the seed."""
        first = Board(BoardConfig(9, 10, seed=42))
        second = Board(BoardConfig(9, 10, seed=42))
        first.place_mines(0, 0)
        second.place_mines(0, 0)
        mines = lambda board: {(r, c) for r, c, cell in board.cells() if cell.is_mine}
        assert mines(first) == mines(second)

    def test_placing_twice_raises(self, seeded_board: Board) -> None:
        """Placement happens once per board."""
        seeded_board.place_mines(0, 0)
        with pytest.raises(RuntimeError, match="already been placed"):
            seeded_board.place_mines(1, 1)


# ============================================================================
# Adjacency Tests
# ============================================================================

class TestAdjacentMines:
    """Test neighbour enumeration and mine counting."""

    @pytest.mark.parametrize(
        "row,col,expected",
        [(0, 0, 3), (0, 8, 3), (8, 0, 3), (8, 8, 3), (0, 4, 5), (4, 0, 5), (4, 4, 8)],
    )
    def test_neighbor_count_is_clamped(
        self, default_board: Board, row: int, col: int, expected: int
    ) -> None:
        """Corners have 3 neighbours, edges 5, interior cells 8."""
        neighbors = default_board.neighbors(row, col)
        assert len(neighbors) == expected
        assert (row, col) not in neighbors

    @pytest.mark.parametrize("seed", range(10))
    def test_counts_match_brute_force(self, seed: int) -> None:
        """Each safe cell counts exactly the mines around it."""
        board = Board(BoardConfig(9, 10, seed=seed))
        board.place_mines(4, 4)
        board.update_adjacent_mines()
        for row, col, cell in board.cells():
            if not cell.is_mine:
                assert cell.adjacent_mines == brute_force_count(board, row, col)

    def test_known_layout_counts(self) -> None:
        """A single corner mine gives 1 to its three neighbours only."""
        board = Board(BoardConfig(3, 1))
        board.get_cell(0, 0).is_mine = True
        board.update_adjacent_mines()
        counts = [
            [board.get_cell(r, c).adjacent_mines for c in range(3)]
            for r in range(3)
        ]
        assert counts == [[0, 1, 0], [1, 1, 0], [0, 0, 0]]

    def test_count_adjacent_flags(self, default_board: Board) -> None:
        """Only flagged neighbours are counted."""
        default_board.get_cell(0, 1).toggle_flag()
        default_board.get_cell(1, 1).toggle_flag()
        default_board.get_cell(3, 3).toggle_flag()
        assert default_board.count_adjacent_flags(0, 0) == 2


# ============================================================================
# Observation Tests
# ============================================================================

class TestObservation:
    """Test the visible-state grid."""

    def test_observation_shape_and_dtype(self, default_board: Board) -> None:
        """Observation is a side x side int8 array."""
        obs = default_board.get_observation()
        assert obs.shape == (9, 9)
        assert obs.dtype == np.int8

    def test_new_board_observation_all_hidden(
        self, default_board: Board
    ) -> None:
        """New board observation is all -1."""
        assert np.all(default_board.get_observation() == -1)

    def test_flagged_and_revealed_cells(self, default_board: Board) -> None:
        """Flags show -2, revealed safe cells their count."""
        default_board.get_cell(0, 0).toggle_flag()
        default_board.get_cell(2, 2).reveal()
        obs = default_board.get_observation()
        assert obs[0, 0] == -2
        assert obs[2, 2] == 0
        assert obs[5, 5] == -1

"""
Unit tests for Cell class.

Tests cell state management, reveal/flag outcomes, and observation conversion.
"""
import pytest
from minesweep import Cell, CellState, FlagOutcome, MinesAlreadyPlacedError, RevealOutcome


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0


# ============================================================================
# Mine and Adjacency Tests
# ============================================================================

class TestCellContent:
    """Test mine marking and adjacency counts."""

    def test_mark_mine(self, hidden_cell: Cell) -> None:
        """Marking a cell makes it a mine."""
        hidden_cell.mark_mine()
        assert hidden_cell.is_mine is True

    def test_mark_mine_twice_raises(self, mine_cell: Cell) -> None:
        """A cell cannot receive a second mine."""
        with pytest.raises(MinesAlreadyPlacedError):
            mine_cell.mark_mine()

    @pytest.mark.parametrize("count", [0, 4, 8])
    def test_set_adjacency_stores_count(self, hidden_cell: Cell, count: int) -> None:
        """Valid counts are stored."""
        hidden_cell.set_adjacency(count)
        assert hidden_cell.adjacent_mines == count

    @pytest.mark.parametrize("count", [-1, 9])
    def test_set_adjacency_rejects_out_of_range(
        self, hidden_cell: Cell, count: int
    ) -> None:
        """Counts outside 0-8 are impossible."""
        with pytest.raises(ValueError, match="0-8"):
            hidden_cell.set_adjacency(count)


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_safe_cell(self, hidden_cell: Cell) -> None:
        """Revealing a hidden safe cell reports a safe reveal."""
        assert hidden_cell.reveal() == RevealOutcome.REVEALED_SAFE
        assert hidden_cell.is_revealed is True

    def test_reveal_mine_cell(self, mine_cell: Cell) -> None:
        """Revealing a mine reports the mine."""
        assert mine_cell.reveal() == RevealOutcome.REVEALED_MINE
        assert mine_cell.is_revealed is True

    def test_reveal_already_revealed(self, hidden_cell: Cell) -> None:
        """Revealing twice reports the cell was already revealed."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() == RevealOutcome.ALREADY_REVEALED

    def test_reveal_flagged_cell_is_rejected(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() == RevealOutcome.REJECTED
        assert hidden_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_hidden_cell(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell should succeed."""
        assert hidden_cell.toggle_flag() == FlagOutcome.NOW_FLAGGED
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        assert hidden_cell.toggle_flag() == FlagOutcome.NOW_HIDDEN
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_is_rejected(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() == FlagOutcome.REJECTED
        assert hidden_cell.is_revealed is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test numeric observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9

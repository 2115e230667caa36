"""
Unit tests for Cell class.

Tests cell flag management, reveal/flag behavior, and visual states.
"""
import pytest
from minefield import Cell, CellVisual


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
        """New cell should be hidden and unmarked by default."""
        cell = Cell()
        assert cell.is_revealed is False
        assert cell.is_hidden is True
        assert cell.is_flagged is False
        assert cell.is_questioned is False

    def test_default_cell_has_zero_neighboring_mines(self) -> None:
        """New cell should have 0 neighboring mines by default."""
        cell = Cell()
        assert cell.neighboring_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_revealed is False

    def test_reveal_clears_question_mark(self, hidden_cell: Cell) -> None:
        """A revealed cell is never questioned."""
        hidden_cell.is_questioned = True
        hidden_cell.reveal()
        assert hidden_cell.is_questioned is False


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_hidden_cell(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell should succeed."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.is_flagged is True

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Toggling twice should clear the flag."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_flagged is False
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_flagged is False


# ============================================================================
# Visual State Tests
# ============================================================================

class TestCellVisualState:
    """Test the visual state a renderer draws."""

    def test_hidden_cell_is_hidden(self, hidden_cell: Cell) -> None:
        assert hidden_cell.visual_state() == CellVisual.HIDDEN

    def test_flagged_cell_is_flagged(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.visual_state() == CellVisual.FLAGGED

    def test_questioned_cell_is_questioned(self, hidden_cell: Cell) -> None:
        hidden_cell.is_questioned = True
        assert hidden_cell.visual_state() == CellVisual.QUESTIONED

    def test_flag_beats_question_mark(self, hidden_cell: Cell) -> None:
        """Flagged takes precedence over questioned."""
        hidden_cell.is_questioned = True
        hidden_cell.toggle_flag()
        assert hidden_cell.visual_state() == CellVisual.FLAGGED

    def test_hidden_mine_is_hidden_while_playing(self, mine_cell: Cell) -> None:
        assert mine_cell.visual_state(lost=False) == CellVisual.HIDDEN

    def test_loss_shows_every_mine(self, mine_cell: Cell) -> None:
        """After a loss mines show regardless of flags."""
        mine_cell.toggle_flag()
        assert mine_cell.visual_state(lost=True) == CellVisual.MINE

    def test_loss_does_not_change_safe_cells(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.visual_state(lost=True) == CellVisual.FLAGGED

    def test_revealed_mine_is_mine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.visual_state() == CellVisual.MINE

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_shows_count(self, count: int) -> None:
        """Revealed cell shows its neighboring mine count."""
        cell = Cell(neighboring_mines=count)
        cell.reveal()
        visual = cell.visual_state()
        assert visual == count
        assert visual.is_count is True


# ============================================================================
# CellVisual Tests
# ============================================================================

class TestCellVisual:
    """Test visual enum helpers."""

    def test_for_count_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            CellVisual.for_count(9)

    def test_markers_are_not_counts(self) -> None:
        for visual in (
            CellVisual.HIDDEN,
            CellVisual.FLAGGED,
            CellVisual.QUESTIONED,
            CellVisual.MINE,
        ):
            assert visual.is_count is False

    def test_symbols(self) -> None:
        assert CellVisual.EMPTY.symbol == "."
        assert CellVisual.THREE.symbol == "3"
        assert CellVisual.HIDDEN.symbol == "#"
        assert CellVisual.FLAGGED.symbol == "F"
        assert CellVisual.QUESTIONED.symbol == "?"
        assert CellVisual.MINE.symbol == "*"

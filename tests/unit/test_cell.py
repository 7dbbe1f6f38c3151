"""
Unit tests for Cell class.

Tests cell state transitions and observation conversion.
"""
import pytest
from sweeper import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_concealed(self) -> None:
        """New cell should be concealed by default."""
        cell = Cell()
        assert cell.state == CellState.CONCEALED
        assert cell.is_concealed is True

    def test_default_cell_has_zero_number(self) -> None:
        """New cell should show no number."""
        assert Cell().number == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_concealed_cell_returns_true(
        self, concealed_cell: Cell
    ) -> None:
        """Revealing a concealed cell should succeed."""
        assert concealed_cell.reveal(3) is True

    def test_reveal_records_number(self, concealed_cell: Cell) -> None:
        """Revealed cell keeps the count it was revealed with."""
        concealed_cell.reveal(3)
        assert concealed_cell.is_revealed is True
        assert concealed_cell.number == 3

    def test_reveal_already_revealed_returns_false(
        self, concealed_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        concealed_cell.reveal(1)
        assert concealed_cell.reveal(2) is False
        assert concealed_cell.number == 1

    def test_reveal_marked_cell_returns_false(
        self, concealed_cell: Cell
    ) -> None:
        """Cannot reveal a marked cell."""
        concealed_cell.toggle_mark()
        assert concealed_cell.reveal(0) is False
        assert concealed_cell.is_marked is True


# ============================================================================
# Cell Explode Tests
# ============================================================================

class TestCellExplode:
    """Test exploding a concealed hazard cell."""

    def test_explode_concealed_cell(self, concealed_cell: Cell) -> None:
        """Concealed cell becomes exploded."""
        assert concealed_cell.explode() is True
        assert concealed_cell.is_exploded is True

    def test_exploded_cell_cannot_be_marked(
        self, concealed_cell: Cell
    ) -> None:
        """No transition leaves the exploded state."""
        concealed_cell.explode()
        assert concealed_cell.toggle_mark() is False
        assert concealed_cell.reveal(0) is False
        assert concealed_cell.is_exploded is True


# ============================================================================
# Cell Mark Tests
# ============================================================================

class TestCellMark:
    """Test cell marking behavior."""

    def test_mark_concealed_cell(self, concealed_cell: Cell) -> None:
        """Marking a concealed cell should succeed."""
        assert concealed_cell.toggle_mark() is True
        assert concealed_cell.state == CellState.MARKED

    def test_unmark_returns_to_concealed(self, concealed_cell: Cell) -> None:
        """Unmarking a cell should return it to concealed."""
        concealed_cell.toggle_mark()
        concealed_cell.toggle_mark()
        assert concealed_cell.is_concealed is True

    def test_mark_revealed_cell_returns_false(
        self, concealed_cell: Cell
    ) -> None:
        """Cannot mark a revealed cell."""
        concealed_cell.reveal(0)
        assert concealed_cell.toggle_mark() is False


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_concealed_observation(self, concealed_cell: Cell) -> None:
        assert concealed_cell.to_observation() == -1

    def test_marked_observation(self, concealed_cell: Cell) -> None:
        concealed_cell.toggle_mark()
        assert concealed_cell.to_observation() == -2

    def test_exploded_observation(self, concealed_cell: Cell) -> None:
        concealed_cell.explode()
        assert concealed_cell.to_observation() == 9

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_observation_matches_number(self, count: int) -> None:
        """Revealed cell returns its adjacency count."""
        cell = Cell()
        cell.reveal(count)
        assert cell.to_observation() == count

"""
Cell module for the hazard grid.

Represents the player-visible state of a single grid position
(concealed/revealed/marked/exploded) and the transitions between them.
Whether a cell holds a hazard lives in the Grid, not here.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visibility states of a cell."""

    CONCEALED = auto()
    REVEALED = auto()
    MARKED = auto()
    EXPLODED = auto()


# Observation values used by get_observation() and the Gymnasium adapter
OBS_CONCEALED = -1
OBS_MARKED = -2
OBS_EXPLODED = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Visibility state of one grid position.

    Attributes:
        state: Current visibility state.
        number: Adjacency count recorded when the cell was revealed (0-8).
    """

    state: CellState = CellState.CONCEALED
    number: int = 0

    def reveal(self, number: int) -> bool:
        """
        Reveal this cell, showing its adjacency count.

        Args:
            number: Adjacency count to display.

        Returns:
            True if cell was revealed, False if it was not concealed.
        """
        if self.state != CellState.CONCEALED:
            return False
        self.state = CellState.REVEALED
        self.number = number
        return True

    def explode(self) -> bool:
        """
        Mark this cell as the hazard the player uncovered.

        Returns:
            True if cell exploded, False if it was not concealed.
        """
        if self.state != CellState.CONCEALED:
            return False
        self.state = CellState.EXPLODED
        return True

    def toggle_mark(self) -> bool:
        """
        Toggle a mark on this cell.

        Returns:
            True if the mark was toggled, False if the cell is revealed
            or exploded.
        """
        if self.state == CellState.CONCEALED:
            self.state = CellState.MARKED
            return True
        if self.state == CellState.MARKED:
            self.state = CellState.CONCEALED
            return True
        return False

    def force_state(self, state: CellState) -> None:
        """Set state unconditionally (end-of-game hazard display)."""
        self.state = state

    @property
    def is_concealed(self) -> bool:
        """Check if cell is concealed."""
        return self.state == CellState.CONCEALED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_marked(self) -> bool:
        """Check if cell is marked."""
        return self.state == CellState.MARKED

    @property
    def is_exploded(self) -> bool:
        """Check if cell is exploded."""
        return self.state == CellState.EXPLODED

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Concealed cell
            -2: Marked cell
            0-8: Revealed cell with adjacency count
            9: Exploded hazard
        """
        if self.state == CellState.CONCEALED:
            return OBS_CONCEALED
        if self.state == CellState.MARKED:
            return OBS_MARKED
        if self.state == CellState.EXPLODED:
            return OBS_EXPLODED
        return self.number

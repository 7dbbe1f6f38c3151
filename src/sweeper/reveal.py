"""
Reveal engine: flood fill and end-of-game hazard display.
"""
from enum import Enum, auto
from typing import List, Tuple

from .cell import Cell, CellState
from .grid import Grid


class RevealMode(Enum):
    """How hazard cells are shown when the game ends."""

    SHOW_HAZARDS = auto()
    SHOW_AS_MARKED = auto()


class RevealEngine:
    """
    Applies reveal transitions to a cell table backed by a Grid.

    The cell table is indexed cells[y][x], matching the Grid layout.
    """

    def __init__(self, grid: Grid, cells: List[List[Cell]]) -> None:
        self.grid = grid
        self.cells = cells

    def reveal_from(self, x: int, y: int) -> int:
        """
        Reveal a hazard-free cell, cascading through zero-count cells.

        Each cell leaves CONCEALED at most once, so the work-list drains
        after at most columns * rows pops.

        Args:
            x: Column of a concealed, hazard-free cell.
            y: Row of that cell.

        Returns:
            Number of cells revealed.
        """
        revealed = 0
        pending: List[Tuple[int, int]] = [(x, y)]
        while pending:
            cx, cy = pending.pop()
            cell = self.cells[cy][cx]
            if not cell.reveal(self.grid.adjacency_count(cx, cy)):
                continue
            revealed += 1
            if cell.number != 0:
                continue
            for nx, ny in self.grid.neighbors(cx, cy):
                if self.grid.has_hazard(nx, ny):
                    continue
                if self.cells[ny][nx].is_concealed:
                    pending.append((nx, ny))
        return revealed

    def reveal_all_hazards(self, mode: RevealMode) -> None:
        """Show every hazard cell as exploded or marked."""
        state = (
            CellState.EXPLODED if mode == RevealMode.SHOW_HAZARDS
            else CellState.MARKED
        )
        for x, y in self.grid.hazard_positions():
            self.cells[y][x].force_state(state)

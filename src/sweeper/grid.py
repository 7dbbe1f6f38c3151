"""
Grid module for the hazard grid.

Stores which cells hold hazards and how many hazards surround each cell.
Arrays are laid out as (rows, columns) and indexed [y, x].
"""
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np


_NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


@dataclass(eq=False)
class Grid:
    """
    Fixed-size store of hazard flags and adjacency counts.

    Attributes:
        columns: Number of columns (x range).
        rows: Number of rows (y range).
    """

    columns: int
    rows: int
    _hazards: np.ndarray = field(init=False, repr=False)
    _counts: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError("Grid dimensions must be positive")
        self.clear()

    # ========================================================================
    # Bounds and Neighbors
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= x < self.columns and 0 <= y < self.rows

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) outside {self.columns}x{self.rows} grid"
            )

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get in-bounds neighboring positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples, at most 8; edges are not wrapped.
        """
        result = []
        for dx, dy in _NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((nx, ny))
        return result

    # ========================================================================
    # Hazards and Counts
    # ========================================================================

    def set_hazard(self, x: int, y: int, value: bool) -> None:
        """
        Set or clear the hazard at a position.

        Counts are not updated; call recompute_counts() when done.
        """
        self._check_bounds(x, y)
        self._hazards[y, x] = value

    def has_hazard(self, x: int, y: int) -> bool:
        """Check for a hazard; positions outside the grid have none."""
        if not self.in_bounds(x, y):
            return False
        return bool(self._hazards[y, x])

    def adjacency_count(self, x: int, y: int) -> int:
        """Number of hazards among the 8 neighbors of (x, y)."""
        self._check_bounds(x, y)
        return int(self._counts[y, x])

    def recompute_counts(self) -> None:
        """Recalculate adjacency counts for every cell."""
        for y in range(self.rows):
            for x in range(self.columns):
                self._counts[y, x] = sum(
                    1 for dx, dy in _NEIGHBOR_OFFSETS
                    if self.has_hazard(x + dx, y + dy)
                )

    def clear(self) -> None:
        """Remove all hazards and zero all counts."""
        self._hazards = np.zeros((self.rows, self.columns), dtype=bool)
        self._counts = np.zeros((self.rows, self.columns), dtype=np.int8)

    @property
    def hazard_count(self) -> int:
        """Total hazards currently on the grid."""
        return int(self._hazards.sum())

    @property
    def total_cells(self) -> int:
        return self.columns * self.rows

    def hazard_positions(self) -> List[Tuple[int, int]]:
        """All (x, y) positions holding a hazard, row by row."""
        ys, xs = np.nonzero(self._hazards)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def format_counts(self) -> str:
        """Adjacency-count table, one grid row per line."""
        return "\n".join(
            " ".join(str(int(count)) for count in self._counts[y])
            for y in range(self.rows)
        )

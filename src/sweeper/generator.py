"""
Board generation for the hazard grid.

Places hazards either at random or from an imported layout, then
derives adjacency counts.
"""
import logging
from typing import Optional, Sequence

import numpy as np

from .grid import Grid

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a random source; unseeded unless a seed is given."""
    return np.random.default_rng(seed)


def place_random(
    grid: Grid,
    hazard_count: int,
    rng: Optional[np.random.Generator] = None,
) -> None:
    """
    Place exactly hazard_count hazards on an empty grid.

    Uses rejection sampling: draw a uniformly random cell and claim it
    if it does not already hold a hazard. Expected cost grows as the
    density approaches 1.

    Args:
        grid: Grid to populate. Existing hazards are cleared first.
        hazard_count: Number of distinct hazards to place.
        rng: Random source (default: fresh unseeded generator).

    Raises:
        ValueError: If hazard_count is negative or exceeds the cell count.
    """
    if hazard_count < 0:
        raise ValueError("Number of hazards cannot be negative")
    if hazard_count > grid.total_cells:
        raise ValueError(f"Too many hazards (max {grid.total_cells})")

    rng = rng if rng is not None else make_rng()
    grid.clear()

    to_place = hazard_count
    draws = 0
    while to_place > 0:
        x = int(rng.integers(grid.columns))
        y = int(rng.integers(grid.rows))
        draws += 1
        if not grid.has_hazard(x, y):
            grid.set_hazard(x, y, True)
            to_place -= 1

    grid.recompute_counts()
    logger.debug(
        "Placed %d hazards on %dx%d grid in %d draws",
        hazard_count, grid.columns, grid.rows, draws,
    )


def apply_layout(grid: Grid, layout: Sequence[Sequence[bool]]) -> int:
    """
    Copy a hazard layout into the grid.

    layout[y][x] is truthy where a hazard sits. Layout cells beyond the
    grid are ignored; grid cells the layout does not cover stay clear.

    Returns:
        Number of hazards placed.
    """
    grid.clear()
    for y, row in enumerate(layout[:grid.rows]):
        for x, value in enumerate(row[:grid.columns]):
            if value:
                grid.set_hazard(x, y, True)

    grid.recompute_counts()
    placed = grid.hazard_count
    logger.debug(
        "Imported layout with %d hazards onto %dx%d grid",
        placed, grid.columns, grid.rows,
    )
    return placed

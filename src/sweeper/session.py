"""
Game session for the hazard grid.

Ties together board generation, cell states and the reveal engine, and
tracks marks, the game outcome and the debug overlay.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .cell import Cell, CellState
from .config import BoardConfig
from .errors import LayoutError
from .generator import apply_layout, make_rng, place_random
from .grid import Grid
from .layout import layout_size, load_layout as read_layout
from .reveal import RevealEngine, RevealMode
from .snapshot import BoardSnapshot, CellView

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameOutcome(Enum):
    """Possible outcomes of a session."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Session
# ============================================================================

@dataclass(eq=False)
class GameSession:
    """
    One game from generation to a terminal outcome or reset.

    Handles primary actions (reveal) and secondary actions (mark),
    win/loss detection, the marked-cell counter and reset.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: np.random.Generator = field(default_factory=make_rng, repr=False)
    _grid: Grid = field(init=False, repr=False)
    _cells: List[List[Cell]] = field(init=False, repr=False)
    _engine: RevealEngine = field(init=False, repr=False)
    _outcome: GameOutcome = field(init=False, default=GameOutcome.IN_PROGRESS)
    _marked_count: int = field(init=False, default=0)
    _total_hazards: int = field(init=False, default=0)
    _debug: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        """Create the grid and generate the first board."""
        self._grid = Grid(self.config.columns, self.config.rows)
        self.reset()

    @classmethod
    def from_layout(
        cls,
        layout: Sequence[Sequence[bool]],
        rng: Optional[np.random.Generator] = None,
    ) -> "GameSession":
        """
        Create a session sized to an imported layout.

        The layout's hazard count becomes the count used by later resets.

        Raises:
            LayoutError: If the layout has no cells.
        """
        columns, rows = layout_size(layout)
        if columns == 0 or rows == 0:
            raise LayoutError("Layout is empty")
        hazards = sum(1 for row in layout for value in row if value)
        config = BoardConfig(columns, rows, hazards)
        session = cls(config, rng) if rng is not None else cls(config)
        session.apply_layout(layout)
        return session

    # ========================================================================
    # Board Lifecycle (Low-level)
    # ========================================================================

    def _clear_state(self) -> None:
        """Conceal every cell and clear counters and outcome."""
        self._cells = [
            [Cell() for _ in range(self.config.columns)]
            for _ in range(self.config.rows)
        ]
        self._engine = RevealEngine(self._grid, self._cells)
        self._outcome = GameOutcome.IN_PROGRESS
        self._marked_count = 0

    def reset(self) -> None:
        """Start a new random game with the configured hazard count."""
        self._clear_state()
        place_random(self._grid, self.config.hazard_count, self.rng)
        self._total_hazards = self._grid.hazard_count
        logger.debug("New game: %s", self.config)

    def apply_layout(self, layout: Sequence[Sequence[bool]]) -> None:
        """
        Start a new game with hazards taken from a layout.

        Dimensions stay as configured; total_hazards becomes the number
        of hazards the layout places on this grid.
        """
        self._clear_state()
        self._total_hazards = apply_layout(self._grid, layout)

    def load_layout(self, path: Union[str, Path], strict: bool = False) -> bool:
        """
        Read a layout file and start a game from it.

        Returns:
            True if the layout was applied. On a read or validation
            failure the current game is left untouched and False is
            returned.
        """
        try:
            layout = read_layout(path, strict=strict)
        except LayoutError as exc:
            logger.warning("Layout not applied: %s", exc)
            return False
        self.apply_layout(layout)
        logger.info("Loaded layout %s (%d hazards)", path, self._total_hazards)
        return True

    def _check_position(self, x: int, y: int) -> None:
        if not self._grid.in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) outside "
                f"{self.config.columns}x{self.config.rows} board"
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def primary_action(self, x: int, y: int) -> bool:
        """
        Reveal the cell at (x, y).

        Uncovering a hazard loses the game. Uncovering a zero-count cell
        cascades through its neighbors. The game is won once every
        hazard-free cell is revealed or marked.

        Returns:
            True if anything changed, False for a no-op.

        Raises:
            IndexError: If (x, y) is outside the board.
        """
        self._check_position(x, y)
        if self._outcome != GameOutcome.IN_PROGRESS:
            return False
        cell = self._cells[y][x]
        if not cell.is_concealed:
            return False

        if self._grid.has_hazard(x, y):
            cell.explode()
            self._engine.reveal_all_hazards(RevealMode.SHOW_HAZARDS)
            self._outcome = GameOutcome.LOST
            logger.info("Game lost at (%d, %d)", x, y)
            return True

        if self._grid.adjacency_count(x, y) == 0:
            self._engine.reveal_from(x, y)
        else:
            cell.reveal(self._grid.adjacency_count(x, y))

        self._check_win_condition()
        return True

    def _check_win_condition(self) -> None:
        """Win when every hazard-free cell is revealed or marked."""
        settled = 0
        for y in range(self.config.rows):
            for x in range(self.config.columns):
                if self._grid.has_hazard(x, y):
                    continue
                if self._cells[y][x].state in (
                    CellState.REVEALED, CellState.MARKED
                ):
                    settled += 1
        if settled == self._grid.total_cells - self._total_hazards:
            self._engine.reveal_all_hazards(RevealMode.SHOW_AS_MARKED)
            self._outcome = GameOutcome.WON
            logger.info("Game won")

    def secondary_action(self, x: int, y: int) -> bool:
        """
        Toggle a mark on the cell at (x, y).

        Returns:
            True if the mark was toggled, False for a no-op.

        Raises:
            IndexError: If (x, y) is outside the board.
        """
        self._check_position(x, y)
        if self._outcome != GameOutcome.IN_PROGRESS:
            return False
        cell = self._cells[y][x]
        if not cell.toggle_mark():
            return False
        self._marked_count += 1 if cell.is_marked else -1
        return True

    def toggle_debug(self) -> bool:
        """Flip the hazard overlay. Cell states are not touched."""
        self._debug = not self._debug
        return self._debug

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def outcome(self) -> GameOutcome:
        """Get current outcome."""
        return self._outcome

    @property
    def is_playing(self) -> bool:
        return self._outcome == GameOutcome.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        return self._outcome == GameOutcome.WON

    @property
    def is_lost(self) -> bool:
        return self._outcome == GameOutcome.LOST

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def total_hazards(self) -> int:
        return self._total_hazards

    @property
    def marked_count(self) -> int:
        return self._marked_count

    @property
    def remaining_hazards(self) -> int:
        """Hazards minus marks; negative when over-marked."""
        return self._total_hazards - self._marked_count

    @property
    def debug(self) -> bool:
        return self._debug

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._grid.in_bounds(x, y):
            return None
        return self._cells[y][x]

    def snapshot(self) -> BoardSnapshot:
        """Read-only picture of the board for renderers."""
        cells = tuple(
            tuple(
                CellView(
                    state=cell.state,
                    number=cell.number,
                    hazard=self._grid.has_hazard(x, y) if self._debug else None,
                )
                for x, cell in enumerate(row)
            )
            for y, row in enumerate(self._cells)
        )
        return BoardSnapshot(
            columns=self.config.columns,
            rows=self.config.rows,
            cells=cells,
            outcome=self._outcome.name,
            remaining_hazards=self.remaining_hazards,
            debug=self._debug,
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            int8 array of shape (rows, columns) where:
                -1 = concealed
                -2 = marked
                0-8 = revealed with adjacency count
                9 = exploded hazard
        """
        obs = np.zeros((self.config.rows, self.config.columns), dtype=np.int8)
        for y in range(self.config.rows):
            for x in range(self.config.columns):
                obs[y, x] = self._cells[y][x].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """Concealed (x, y) positions, i.e. cells a primary action changes."""
        return [
            (x, y)
            for y in range(self.config.rows)
            for x in range(self.config.columns)
            if self._cells[y][x].is_concealed
        ]

"""
Read-only view of a game session for renderers.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .cell import CellState


@dataclass(frozen=True)
class CellView:
    """
    What a renderer may know about one cell.

    Attributes:
        state: Visibility state.
        number: Adjacency count recorded at reveal (0 until revealed).
        hazard: Hazard flag when the debug overlay is on, else None.
    """

    state: CellState
    number: int = 0
    hazard: Optional[bool] = None


@dataclass(frozen=True)
class BoardSnapshot:
    """
    Immutable picture of the session at one moment.

    cells is indexed cells[y][x].
    """

    columns: int
    rows: int
    cells: Tuple[Tuple[CellView, ...], ...]
    outcome: str
    remaining_hazards: int
    debug: bool = False

    def cell(self, x: int, y: int) -> CellView:
        return self.cells[y][x]

    def to_text(self) -> str:
        """
        Render the board as plain text.

        '.' concealed, 'F' marked, ' ' empty, 1-8 counts, 'X' exploded,
        '*' concealed hazard shown by the debug overlay.
        """
        lines = []
        for row in self.cells:
            lines.append(" ".join(_cell_char(view) for view in row))
        lines.append(f"Hazards left: {self.remaining_hazards}  [{self.outcome}]")
        return "\n".join(lines)


def _cell_char(view: CellView) -> str:
    if view.state == CellState.MARKED:
        return "F"
    if view.state == CellState.EXPLODED:
        return "X"
    if view.state == CellState.REVEALED:
        return str(view.number) if view.number else " "
    if view.hazard:
        return "*"
    return "."

"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import (
    BoardConfig,
    Cell,
    GameSession,
    Grid,
    make_rng,
    parse_layout,
)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def make_session() -> Callable[[List[str]], GameSession]:
    """Factory building deterministic sessions from layout strings."""
    def build(rows: List[str]) -> GameSession:
        return GameSession.from_layout(parse_layout(rows), make_rng(0))
    return build


@pytest.fixture
def default_session() -> GameSession:
    """Create a default 9x9 session with 10 hazards."""
    return GameSession(BoardConfig(), make_rng(1234))


@pytest.fixture
def empty_session() -> GameSession:
    """Create a 5x5 session with no hazards for cascade testing."""
    return GameSession(BoardConfig(5, 5, 0), make_rng(0))


@pytest.fixture
def two_by_two_session(make_session) -> GameSession:
    """2x2 board with a single hazard in the bottom-right corner."""
    return make_session(["00", "01"])


@pytest.fixture
def corner_hazards_session(make_session) -> GameSession:
    """3x3 board with hazards in the top-left and bottom-right corners."""
    return make_session(["100", "000", "001"])


@pytest.fixture
def wall_session(make_session) -> GameSession:
    """5x3 board split by a column of hazards at x=2."""
    return make_session(["00100", "00100", "00100"])


# ============================================================================
# Grid and Cell Fixtures
# ============================================================================

@pytest.fixture
def empty_grid() -> Grid:
    """Create a 4x3 grid with no hazards."""
    return Grid(4, 3)


@pytest.fixture
def concealed_cell() -> Cell:
    """Create a concealed cell."""
    return Cell()


# ============================================================================
# File Fixtures
# ============================================================================

@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Three-line configuration file for an 8x6 board with 7 hazards."""
    path = tmp_path / "config.cfg"
    path.write_text("8\n6\n7\n")
    return path


@pytest.fixture
def layout_file(tmp_path: Path) -> Path:
    """4x3 layout file with 2 hazards."""
    path = tmp_path / "board.brd"
    path.write_text("1000\n0000\n0001\n")
    return path

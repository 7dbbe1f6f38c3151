"""
Board configuration: dimensions, hazard count, presets and loading
from a configuration file.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from .errors import ConfigError


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a hazard grid.

    Attributes:
        columns: Number of columns.
        rows: Number of rows.
        hazard_count: Total hazards to place.
    """

    columns: int = 9
    rows: int = 9
    hazard_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.columns < 1 or self.rows < 1:
            raise ConfigError("Board dimensions must be positive")
        if self.hazard_count < 0:
            raise ConfigError("Number of hazards cannot be negative")
        max_hazards = self.columns * self.rows
        if self.hazard_count > max_hazards:
            raise ConfigError(f"Too many hazards (max {max_hazards})")

    @property
    def total_cells(self) -> int:
        return self.columns * self.rows


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)


# ============================================================================
# Configuration File
# ============================================================================

_CONFIG_FIELDS = ("columns", "rows", "hazard_count")


def parse_config(lines: List[str]) -> BoardConfig:
    """
    Build a BoardConfig from configuration file lines.

    The first three lines hold columns, rows and hazard count; only the
    first whitespace-separated token of each line is read.

    Raises:
        ConfigError: If a line is missing or does not start with an integer.
    """
    values = []
    for index, name in enumerate(_CONFIG_FIELDS):
        if index >= len(lines):
            raise ConfigError(f"Configuration is missing '{name}'")
        tokens = lines[index].split()
        if not tokens:
            raise ConfigError(f"Configuration line {index + 1} is empty")
        try:
            values.append(int(tokens[0]))
        except ValueError:
            raise ConfigError(
                f"Configuration '{name}' is not an integer: {tokens[0]!r}"
            ) from None
    return BoardConfig(*values)


def load_config(path: Union[str, Path]) -> BoardConfig:
    """
    Read a BoardConfig from a three-line configuration file.

    Raises:
        ConfigError: If the file cannot be read or is incomplete.
    """
    try:
        text = Path(path).read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read configuration {path}: {exc}") from exc
    return parse_config(text.splitlines())

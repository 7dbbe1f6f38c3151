"""
Hazard grid puzzle game module.

Provides the core game logic: grid model, board generation, cell
states, reveal engine and game session, plus the providers and adapters
front ends use to drive it.
"""
from .cell import Cell, CellState
from .config import BoardConfig, BEGINNER, INTERMEDIATE, EXPERT, load_config
from .errors import ConfigError, LayoutError
from .events import (
    PrimaryAction,
    SecondaryAction,
    ResetRequest,
    ToggleDebug,
    LoadLayout,
    dispatch,
    parse_command,
)
from .generator import apply_layout, make_rng, place_random
from .grid import Grid
from .layout import load_layout, parse_layout
from .reveal import RevealEngine, RevealMode
from .session import GameOutcome, GameSession
from .snapshot import BoardSnapshot, CellView
from .environment import SweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "load_config",
    "ConfigError",
    "LayoutError",
    "PrimaryAction",
    "SecondaryAction",
    "ResetRequest",
    "ToggleDebug",
    "LoadLayout",
    "dispatch",
    "parse_command",
    "apply_layout",
    "make_rng",
    "place_random",
    "Grid",
    "load_layout",
    "parse_layout",
    "RevealEngine",
    "RevealMode",
    "GameOutcome",
    "GameSession",
    "BoardSnapshot",
    "CellView",
    "SweeperEnv",
]

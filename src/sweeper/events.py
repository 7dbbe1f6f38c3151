"""
Input events for a game session.

Front ends translate clicks or typed commands into these events, so the
session only ever sees grid coordinates or explicit UI commands.
"""
from dataclasses import dataclass
from typing import Optional, Union

from .session import GameSession


@dataclass(frozen=True)
class PrimaryAction:
    """Reveal the cell at (x, y)."""

    x: int
    y: int


@dataclass(frozen=True)
class SecondaryAction:
    """Toggle a mark on the cell at (x, y)."""

    x: int
    y: int


@dataclass(frozen=True)
class ResetRequest:
    """Start a new random game."""


@dataclass(frozen=True)
class ToggleDebug:
    """Show or hide the hazard overlay."""


@dataclass(frozen=True)
class LoadLayout:
    """Start a game from a layout file."""

    path: str
    strict: bool = False


Event = Union[PrimaryAction, SecondaryAction, ResetRequest, ToggleDebug, LoadLayout]


def dispatch(session: GameSession, event: Event) -> bool:
    """
    Apply one event to a session.

    Returns:
        True if the session changed. Reset always counts as a change.

    Raises:
        TypeError: For objects that are not events.
    """
    if isinstance(event, PrimaryAction):
        return session.primary_action(event.x, event.y)
    if isinstance(event, SecondaryAction):
        return session.secondary_action(event.x, event.y)
    if isinstance(event, ResetRequest):
        session.reset()
        return True
    if isinstance(event, ToggleDebug):
        session.toggle_debug()
        return True
    if isinstance(event, LoadLayout):
        return session.load_layout(event.path, strict=event.strict)
    raise TypeError(f"Not an event: {event!r}")


_GRID_COMMANDS = {
    "r": PrimaryAction,
    "reveal": PrimaryAction,
    "m": SecondaryAction,
    "mark": SecondaryAction,
}


def parse_command(
    text: str,
    columns: Optional[int] = None,
    rows: Optional[int] = None,
    strict: bool = False,
) -> Optional[Event]:
    """
    Parse a typed command.

    Commands:
        r X Y / reveal X Y   primary action
        m X Y / mark X Y     secondary action
        n / new / reset      new game
        d / debug            toggle hazard overlay
        load PATH            load a layout file

    Args:
        text: Command line as typed.
        columns: Board width, for bounds checking grid commands.
        rows: Board height, for bounds checking grid commands.
        strict: Parse layouts named by load commands strictly.

    Returns:
        The event, or None for an empty line.

    Raises:
        ValueError: If the command is unknown or malformed.
    """
    parts = text.split()
    if not parts:
        return None
    verb, args = parts[0].lower(), parts[1:]

    if verb in _GRID_COMMANDS:
        if len(args) != 2:
            raise ValueError(f"Usage: {verb} X Y")
        try:
            x, y = int(args[0]), int(args[1])
        except ValueError:
            raise ValueError("Coordinates must be integers") from None
        if columns is not None and rows is not None:
            if not (0 <= x < columns and 0 <= y < rows):
                raise ValueError(
                    f"({x}, {y}) is off the {columns}x{rows} board"
                )
        return _GRID_COMMANDS[verb](x, y)

    if verb in ("n", "new", "reset"):
        return ResetRequest()
    if verb in ("d", "debug"):
        return ToggleDebug()
    if verb == "load":
        if len(args) != 1:
            raise ValueError("Usage: load PATH")
        return LoadLayout(args[0], strict=strict)
    raise ValueError(f"Unknown command: {parts[0]}")

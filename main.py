#!/usr/bin/env python3
"""
Hazard Sweeper - Main entry point.

Usage:
    python main.py play [--config FILE | --columns C --rows R --hazards H]
                        [--layout FILE] [--strict-layout] [--seed N]
    python main.py numbers [--config FILE] [--layout FILE] [--seed N]
"""
import argparse
import logging
import sys
from typing import Optional

from src.sweeper import (
    BoardConfig,
    ConfigError,
    GameSession,
    LayoutError,
    dispatch,
    load_config,
    load_layout,
    make_rng,
    parse_command,
)

HELP_TEXT = """Commands:
  r X Y     reveal cell (column X, row Y)
  m X Y     toggle mark on cell
  n         new game
  d         toggle hazard overlay
  load FILE load a layout file
  q         quit"""


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Board configuration from a config file or explicit options."""
    if args.config:
        return load_config(args.config)
    return BoardConfig(args.columns, args.rows, args.hazards)


def build_session(args: argparse.Namespace) -> GameSession:
    """Create the session described by the command-line options."""
    rng = make_rng(args.seed)
    if args.layout and not args.config:
        layout = load_layout(args.layout, strict=args.strict_layout)
        return GameSession.from_layout(layout, rng)

    session = GameSession(build_config(args), rng)
    if args.layout and not session.load_layout(
        args.layout, strict=args.strict_layout
    ):
        print(f"Failed to load layout {args.layout}; using a random board.")
    return session


def play(args: argparse.Namespace) -> None:
    """Interactive text game."""
    session = build_session(args)
    print(HELP_TEXT)

    while True:
        print()
        print(session.snapshot().to_text())
        try:
            line = input("> ")
        except EOFError:
            break
        if line.strip().lower() in ("q", "quit", "exit"):
            break

        try:
            event = parse_command(
                line, session.config.columns, session.config.rows,
                strict=args.strict_layout,
            )
        except ValueError as exc:
            print(exc)
            continue
        if event is None:
            continue
        if not dispatch(session, event):
            print("Nothing happened.")

        if session.is_won:
            print("\n*** WIN! ***")
        elif session.is_lost:
            print("\n*** LOST (uncovered a hazard) ***")


def numbers(args: argparse.Namespace) -> None:
    """Print the adjacency counts of a generated or imported board."""
    session = build_session(args)
    print(session.grid.format_counts())


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command that builds a board."""
    parser.add_argument("--config", help="Three-line configuration file")
    parser.add_argument("--columns", type=int, default=9, help="Board width")
    parser.add_argument("--rows", type=int, default=9, help="Board height")
    parser.add_argument(
        "--hazards", type=int, default=10, help="Number of hazards"
    )
    parser.add_argument("--layout", help="Layout file to start from")
    parser.add_argument(
        "--strict-layout",
        action="store_true",
        help="Reject layouts with unknown characters or ragged rows",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for board generation"
    )


def main(argv: Optional[list] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Hazard Sweeper - grid puzzle game"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    numbers_parser = subparsers.add_parser(
        "numbers", help="Print a board's adjacency counts"
    )
    add_board_arguments(numbers_parser)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "numbers":
            numbers(args)
        else:
            parser.print_help()
    except ConfigError as exc:
        print(f"Failed to read configuration: {exc}", file=sys.stderr)
        return 1
    except LayoutError as exc:
        print(f"Failed to read layout: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

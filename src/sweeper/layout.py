"""
Board layout files.

A layout is one text line per grid row; '1' marks a hazard, '0' a
clear cell. By default other characters are skipped and rows may differ
in length. Strict parsing rejects both.
"""
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .errors import LayoutError

HAZARD_MARKER = "1"
CLEAR_MARKER = "0"

Layout = List[List[bool]]


def parse_layout(lines: Iterable[str], strict: bool = False) -> Layout:
    """
    Convert layout lines into a matrix of hazard flags.

    Args:
        lines: Text lines, one per grid row.
        strict: Reject unknown characters and rows of unequal length.

    Returns:
        layout[y][x], True where a hazard sits.

    Raises:
        LayoutError: In strict mode, on malformed input.
    """
    layout: Layout = []
    for line_no, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        row = []
        for ch in line:
            if ch == HAZARD_MARKER:
                row.append(True)
            elif ch == CLEAR_MARKER:
                row.append(False)
            elif strict:
                raise LayoutError(
                    f"Line {line_no}: unexpected character {ch!r}"
                )
        layout.append(row)

    if strict:
        _validate_shape(layout)
    return layout


def _validate_shape(layout: Layout) -> None:
    if not layout or not layout[0]:
        raise LayoutError("Layout is empty")
    width = len(layout[0])
    for y, row in enumerate(layout):
        if len(row) != width:
            raise LayoutError(
                f"Row {y} has {len(row)} cells, expected {width}"
            )


def load_layout(path: Union[str, Path], strict: bool = False) -> Layout:
    """
    Read a layout file.

    Raises:
        LayoutError: If the file cannot be read, or (strict) is malformed.
    """
    try:
        text = Path(path).read_text()
    except (OSError, UnicodeDecodeError) as exc:
        raise LayoutError(f"Cannot read layout {path}: {exc}") from exc
    return parse_layout(text.splitlines(), strict=strict)


def layout_size(layout: Layout) -> Tuple[int, int]:
    """(columns, rows) covered by a possibly jagged layout."""
    columns = max((len(row) for row in layout), default=0)
    return columns, len(layout)

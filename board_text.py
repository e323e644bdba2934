from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from models import Board, BoardGrid, TileKind

START_LINE_RE = re.compile(r"^start:\s*(\d+)\s*,\s*(\d+)\s*$", re.IGNORECASE)

HOLE_CHAR = str(int(TileKind.HOLE))


def normalize_grid_lines(lines: List[str], pad_char: str = HOLE_CHAR) -> Tuple[List[str], int, int]:
    """Normalize board lines to equal width.

    Args:
        lines: Raw board lines (without the start line).
        pad_char: Character to pad short lines with.

    Returns:
        (normalized_lines, width_tiles, height_tiles)

    Raises:
        ValueError: If no lines are provided.
    """
    if not lines:
        raise ValueError("Board map is empty.")
    width_tiles = max(len(line) for line in lines)
    height_tiles = len(lines)
    normalized = [line.ljust(width_tiles, pad_char) for line in lines]
    return normalized, width_tiles, height_tiles


def render_rows(board: Board) -> List[str]:
    return ["".join(str(int(kind)) for kind in row) for row in board.rows()]


def render_board(board: Board) -> str:
    """Return the diagnostic view: one digit per tile, then ``start: x, y``."""
    x, y = board.start
    return "\n".join(render_rows(board)) + f"\nstart: {x}, {y}"


def _parse_row(line: str, row_number: int) -> Tuple[TileKind, ...]:
    kinds = []
    for col, ch in enumerate(line, start=1):
        try:
            kinds.append(TileKind(int(ch)))
        except ValueError:
            raise ValueError(
                f"Unknown tile {ch!r} at column {col} of row {row_number}."
            ) from None
    return tuple(kinds)


def parse_board(text: str) -> Board:
    """Rebuild a Board from its diagnostic view.

    Blank lines are ignored. The last non-blank line must be the start line.

    Raises:
        ValueError: On an empty map, an unknown tile digit, or a missing,
            malformed or out-of-bounds start line.
    """
    lines = [ln.strip() for ln in text.splitlines() if ln.strip() != ""]
    if not lines:
        raise ValueError("Board text is empty.")

    m = START_LINE_RE.match(lines[-1])
    if not m:
        raise ValueError(f"Expected 'start: x, y' as the last line, got {lines[-1]!r}.")
    start = (int(m.group(1)), int(m.group(2)))

    grid_lines, _, _ = normalize_grid_lines(lines[:-1])
    grid = BoardGrid(
        rows=tuple(_parse_row(line, n) for n, line in enumerate(grid_lines, start=1))
    )
    if not grid.in_bounds(start):
        raise ValueError(f"Start {start} is outside a {grid.width}x{grid.height} board.")
    return Board(grid=grid, start=start)


def parse_boards(texts: Sequence[str]) -> List[Board]:
    return [parse_board(t) for t in texts]

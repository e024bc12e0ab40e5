"""Grid geometry and winning lines for 3x3 tic-tac-toe."""

from __future__ import annotations

from typing import Tuple

from engine.errors import InvalidPosition

BOARD_ROWS = 3
BOARD_COLS = 3
CELL_COUNT = BOARD_ROWS * BOARD_COLS

Position = int
Line = Tuple[int, int, int]

WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def in_bounds(position: int) -> bool:
    """Return whether an index addresses a cell of the grid."""
    return isinstance(position, int) and not isinstance(position, bool) and 0 <= position < CELL_COUNT


def require_position(position: int) -> int:
    if not in_bounds(position):
        raise InvalidPosition(f"Position must be an integer in [0, {CELL_COUNT - 1}], got {position!r}")
    return position


def index_to_coords(position: int) -> Tuple[int, int]:
    """Convert a row-major index to (row, col)."""
    require_position(position)
    return (position // BOARD_COLS, position % BOARD_COLS)


def coords_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a row-major index."""
    if not (0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS):
        raise InvalidPosition(f"Coordinates out of range: ({row}, {col})")
    return row * BOARD_COLS + col

"""Tic-tac-toe board state and outcome queries."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple

from engine.errors import IllegalPlacement, InvalidPosition
from engine.marks import MARKS, Mark
from engine.rules import BOARD_COLS, BOARD_ROWS, CELL_COUNT, WINNING_LINES, Line, Position, require_position

Cell = Optional[Mark]

_EMPTY_SYMBOLS = {"", ".", "_", "-", " "}


class BoardState:
    """Nine cells, each empty (None) or holding one Mark."""

    rows: int = BOARD_ROWS
    cols: int = BOARD_COLS

    def __init__(self) -> None:
        self._cells: List[Cell] = [None] * CELL_COUNT

    @classmethod
    def from_cells(cls, cells: Sequence[object]) -> "BoardState":
        """Build a board from 9 values: a Mark, "X"/"O", or an empty marker."""
        if len(cells) != CELL_COUNT:
            raise InvalidPosition(f"Board needs exactly {CELL_COUNT} cells, got {len(cells)}")
        board = cls()
        for index, value in enumerate(cells):
            if value is None or (isinstance(value, str) and value in _EMPTY_SYMBOLS):
                continue
            try:
                mark = Mark(value.upper() if isinstance(value, str) else value)
            except ValueError:
                raise IllegalPlacement(f"Not a mark: {value!r}", position=index) from None
            board._cells[index] = mark
        return board

    @classmethod
    def from_string(cls, layout: str) -> "BoardState":
        """Build a board from a string such as "XX.O....." (whitespace between rows allowed)."""
        compact = "".join(layout.split()) if len(layout) != CELL_COUNT else layout
        return cls.from_cells(list(compact))

    def clone(self) -> "BoardState":
        cloned = BoardState.__new__(BoardState)
        cloned._cells = list(self._cells)
        return cloned

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    def get_cell(self, position: Position) -> Cell:
        """Return cell content at a position."""
        return self._cells[require_position(position)]

    def is_empty(self, position: Position) -> bool:
        return self._cells[require_position(position)] is None

    def place(self, position: Position, mark: Mark) -> None:
        """Put a mark on an empty cell."""
        require_position(position)
        if not isinstance(mark, Mark):
            raise IllegalPlacement(f"Not a mark: {mark!r}", position=position)
        if self._cells[position] is not None:
            raise IllegalPlacement(
                f"Cell {position} is already occupied by {self._cells[position].value}",
                position=position,
            )
        self._cells[position] = mark

    @contextmanager
    def tentative(self, position: Position, mark: Mark) -> Iterator["BoardState"]:
        """Place a mark for the duration of the block and always clear it afterwards."""
        self.place(position, mark)
        try:
            yield self
        finally:
            self._cells[position] = None

    def reset(self) -> None:
        for index in range(CELL_COUNT):
            self._cells[index] = None

    def available_moves(self) -> List[Position]:
        """Empty positions in ascending order."""
        return [index for index, cell in enumerate(self._cells) if cell is None]

    def occupied_count(self) -> int:
        return sum(1 for cell in self._cells if cell is not None)

    def count(self, mark: Mark) -> int:
        return sum(1 for cell in self._cells if cell is mark)

    def winning_line(self, mark: Mark) -> Optional[Line]:
        """Return the first line fully held by a mark, if any."""
        cells = self._cells
        for line in WINNING_LINES:
            if all(cells[index] is mark for index in line):
                return line
        return None

    def has_won(self, mark: Mark) -> bool:
        return self.winning_line(mark) is not None

    def is_draw(self) -> bool:
        """True when every cell is occupied; check has_won first."""
        return all(cell is not None for cell in self._cells)

    def winner(self) -> Optional[Mark]:
        for mark in MARKS:
            if self.has_won(mark):
                return mark
        return None

    def outcome(self) -> Tuple[bool, Optional[Mark], bool]:
        """Return (is_terminal, winner, is_draw)."""
        winner = self.winner()
        if winner is not None:
            return True, winner, False
        if self.is_draw():
            return True, None, True
        return False, None, False

    def render_ascii(self) -> str:
        """Return a simple human-readable board; empty cells show their index."""
        lines: List[str] = []
        for row in range(self.rows):
            row_cells: List[str] = []
            for col in range(self.cols):
                index = row * self.cols + col
                cell = self._cells[index]
                row_cells.append(cell.value if cell is not None else str(index))
            lines.append(" " + " | ".join(row_cells))
        return "\n---+---+---\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        layout = "".join(cell.value if cell is not None else "." for cell in self._cells)
        return f"BoardState({layout!r})"

from typing import Dict, List, Tuple

from engine.board import BoardState
from engine.marks import Mark


def reachable_boards(include_terminal: bool = True) -> List[BoardState]:
    """Every distinct board reachable from the empty board with X moving first."""
    seen: Dict[Tuple, BoardState] = {}

    def walk(board: BoardState, turn: Mark) -> None:
        key = board.cells
        if key in seen:
            return
        done, _, _ = board.outcome()
        if include_terminal or not done:
            seen[key] = board.clone()
        if done:
            return
        for position in board.available_moves():
            with board.tentative(position, turn):
                walk(board, turn.opponent())

    walk(BoardState(), Mark.X)
    return list(seen.values())


def side_to_move(board: BoardState) -> Mark:
    return Mark.X if board.count(Mark.X) == board.count(Mark.O) else Mark.O

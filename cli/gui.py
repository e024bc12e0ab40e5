"""Tkinter desktop GUI for tic-tac-toe."""

from __future__ import annotations

import argparse
import logging
import tkinter as tk
from typing import List, Optional

from ai.move_engine import MoveEngine
from engine.config import Difficulty, FirstTurn, GameMode, SessionConfig
from engine.errors import TicTacToeError
from engine.marks import MARKS, Mark
from engine.session import GameSession

MARK_COLOURS = {
    Mark.X: "#c00000",
    Mark.O: "#003a8c",
}
HIGHLIGHT = "#ffd966"
BOT_DELAY_MS = 300


class TicTacToeGUI(tk.Tk):
    """Board of nine buttons plus mode, difficulty, first-turn and mark selectors."""

    def __init__(self, config: Optional[SessionConfig] = None, seed: Optional[int] = None) -> None:
        super().__init__()
        self.title("Tic-Tac-Toe")
        self.resizable(False, False)

        self.session = GameSession(config or SessionConfig(), move_engine=MoveEngine(seed=seed))
        self._pending_bot: Optional[str] = None

        self.mode_var = tk.StringVar(value=self.session.config.mode.value)
        self.difficulty_var = tk.StringVar(value=self.session.config.difficulty.value)
        self.first_turn_var = tk.StringVar(value=self.session.config.first_turn.value)
        self.player_mark_var = tk.StringVar(value=self.session.config.player_mark.value)
        self.status_var = tk.StringVar(value="")

        self._build_layout()
        self._new_game()

    def _build_layout(self) -> None:
        outer = tk.Frame(self, padx=10, pady=10)
        outer.pack()

        controls = tk.Frame(outer)
        controls.grid(row=0, column=0, sticky="w", pady=(0, 6))
        self._add_selector(controls, 0, "Mode", self.mode_var, [m.value for m in GameMode])
        self._add_selector(controls, 1, "Difficulty", self.difficulty_var, [d.value for d in Difficulty])
        self._add_selector(controls, 2, "First", self.first_turn_var, [f.value for f in FirstTurn])
        self._add_selector(controls, 3, "You play", self.player_mark_var, [m.value for m in MARKS])

        tk.Label(outer, textvariable=self.status_var, anchor="w", font=("Segoe UI", 11, "bold")).grid(
            row=1, column=0, sticky="w", pady=(0, 8)
        )

        self.buttons: List[tk.Button] = []
        board_frame = tk.Frame(outer, bd=1, relief=tk.SOLID)
        board_frame.grid(row=2, column=0)
        for index in range(self.session.board.rows * self.session.board.cols):
            btn = tk.Button(
                board_frame,
                text="",
                width=4,
                height=2,
                font=("Segoe UI", 20, "bold"),
                command=lambda i=index: self._on_cell_click(i),
            )
            btn.grid(row=index // self.session.board.cols, column=index % self.session.board.cols, padx=1, pady=1)
            self.buttons.append(btn)
        self._default_bg = self.buttons[0].cget("bg")

        tk.Button(outer, text="Restart", command=self._new_game).grid(row=3, column=0, pady=(8, 0), sticky="w")

    def _add_selector(self, parent: tk.Frame, column: int, label: str, var: tk.StringVar, choices: List[str]) -> None:
        frame = tk.Frame(parent)
        frame.grid(row=0, column=column, padx=(0, 8))
        tk.Label(frame, text=label).pack(side=tk.LEFT)
        tk.OptionMenu(frame, var, *choices, command=lambda _value: self._on_settings_changed()).pack(side=tk.LEFT)

    def _on_settings_changed(self) -> None:
        # Any settings change restarts the game.
        self._cancel_pending_bot()
        self.session.reconfigure(
            mode=self.mode_var.get(),
            difficulty=self.difficulty_var.get(),
            first_turn=self.first_turn_var.get(),
            player_mark=self.player_mark_var.get(),
        )
        self._after_restart()

    def _new_game(self) -> None:
        self._cancel_pending_bot()
        self.session.start()
        self._after_restart()

    def _after_restart(self) -> None:
        self._refresh_view()
        self._schedule_bot()

    def _cancel_pending_bot(self) -> None:
        if self._pending_bot is not None:
            self.after_cancel(self._pending_bot)
            self._pending_bot = None

    def _schedule_bot(self) -> None:
        if self.session.is_bot_turn():
            self._pending_bot = self.after(BOT_DELAY_MS, self._bot_turn)

    def _refresh_view(self) -> None:
        board = self.session.board
        line = self.session.winning_line or ()
        for index, btn in enumerate(self.buttons):
            cell = board.get_cell(index)
            btn.configure(
                text=cell.value if cell is not None else "",
                fg=MARK_COLOURS[cell] if cell is not None else "#202020",
                bg=HIGHLIGHT if index in line else self._default_bg,
            )

        message = self.session.result_message()
        if message is not None:
            self.status_var.set(message)
        elif self.session.is_bot_turn():
            self.status_var.set("Computer is thinking...")
        else:
            self.status_var.set(f"{self.session.current_turn.value} to move")

    def _on_cell_click(self, index: int) -> None:
        if not self.session.in_progress or self.session.is_bot_turn():
            return
        if not self.session.board.is_empty(index):
            return
        try:
            self.session.play_human(index)
        except TicTacToeError as exc:
            self.status_var.set(str(exc))
            return
        self._refresh_view()
        self._schedule_bot()

    def _bot_turn(self) -> None:
        self._pending_bot = None
        if not self.session.is_bot_turn():
            return
        self.session.play_bot()
        self._refresh_view()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tic-tac-toe desktop GUI")
    parser.add_argument("--config", type=str, default=None, help="Path to a session config JSON")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random strategies")
    parser.add_argument("--log-level", default="INFO", help="Python logging level")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    config = SessionConfig.from_json(args.config) if args.config else SessionConfig()
    app = TicTacToeGUI(config=config, seed=args.seed)
    app.mainloop()


if __name__ == "__main__":
    main()

"""
TicTacToe game implementation.

Uses int8 board:
    0 = empty
    1 = player 1 (X)
    2 = player 2 (O)

Cells are addressed by flat index 0..8 (row * 3 + col).
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from tabletop.core.events import EventEmitter
from tabletop.core.types import EMPTY, PLAYER_ONE, Outcome, other_player
from tabletop.games.game_base import GameBase
from tabletop.games.game_rules import as_pair, is_index
from tabletop.games.game_state import GameState

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "X", 2: "O"}

# Pre-computed winning lines (indices into flattened 3x3 board)
_WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)

CELLS = 9


class TicTacToe(GameBase):
    """TicTacToe on a 3x3 board; X moves first."""

    __slots__ = ('state', 'outcome', 'win_line', 'last_move')

    PLAYER_NAMES = {1: "X", 2: "O"}

    def __init__(self):
        super().__init__()
        self._init_state()

    def _init_state(self) -> None:
        self.state = GameState.empty(3, 3, current_player=PLAYER_ONE)
        self.outcome = Outcome.in_progress()
        self.win_line: Tuple[int, ...] = ()
        self.last_move: int | None = None

    def get_cell_strings(self) -> dict[int, str]:
        return CELL_STRINGS

    def game_id(self) -> str:
        return "tic_tac_toe"

    def clone(self) -> "TicTacToe":
        g = TicTacToe.__new__(TicTacToe)
        g._events = self._events
        g.state = self.state
        g.outcome = self.outcome
        g.win_line = self.win_line
        g.last_move = self.last_move
        return g

    def deep_clone(self) -> "TicTacToe":
        g = self.clone()
        g._events = EventEmitter()
        g.state = self.state.copy()
        return g

    def valid_moves(self) -> np.ndarray:
        """Return empty cell indices."""
        if self.outcome.is_over:
            return np.zeros(0, dtype=np.intp)
        return np.flatnonzero(self.state.board.ravel() == EMPTY)

    def apply_move(self, move) -> bool:
        """Accepts a flat index or a (row, col) pair."""
        if is_index(move):
            return self.handle_move(move)
        pair = as_pair(move)
        if pair is None:
            return self._reject(move, "malformed")
        r, c = pair
        if not (0 <= r < 3 and 0 <= c < 3):
            return self._reject(move, "out of range")
        return self.handle_move(r * 3 + c)

    def handle_move(self, index: int) -> bool:
        if not is_index(index):
            return self._reject(index, "malformed")
        index = int(index)
        if self.outcome.is_over:
            return self._reject(index, "game over")
        if not 0 <= index < CELLS:
            return self._reject(index, "out of range")

        flat = self.state.board.ravel()
        if flat[index] != EMPTY:
            return self._reject(index, "occupied")

        player = self.state.current_player
        flat[index] = player
        self.state.move_count += 1
        self.last_move = index

        for line in _WIN_LINES:
            if flat[line[0]] == player and flat[line[1]] == player and flat[line[2]] == player:
                self.win_line = tuple(int(i) for i in line)
                self.outcome = Outcome.won(player)
                break
        else:
            if self.state.move_count == CELLS:
                self.outcome = Outcome.draw()
            else:
                self.state.current_player = other_player(player)

        self._publish("MOVE", index)
        return True

    def reset(self) -> None:
        self._init_state()
        self._publish("RESET")

    def state_string(self) -> str:
        board = self.state.board
        lines = ["╭───┬───┬───╮"]
        for i in range(3):
            row = "│ " + " │ ".join(
                CELL_STRINGS[board[i, j]] if board[i, j] else str(i * 3 + j)
                for j in range(3)
            ) + " │"
            lines.append(row)
            if i < 2:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)

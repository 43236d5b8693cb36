"""
LineGame - one parameterized engine for k-in-a-row games.

Connect Four and Gomoku differ only in configuration:

    game          rows x cols   win_length   gravity
    connect four  6 x 7         4            yes (moves name a column)
    gomoku        N x N         5            no  (moves name a cell)

Win detection only looks at runs through the cell just played.
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from tabletop.core.events import EventEmitter
from tabletop.core.types import EMPTY, PLAYER_ONE, Outcome, Position, other_player
from tabletop.games.game_base import GameBase
from tabletop.games.game_rules import as_pair, empty_cells, find_line, in_bounds, is_index
from tabletop.games.game_state import GameState

logger = logging.getLogger(__name__)


class LineGame(GameBase):
    """Rectangular grid; first to line up `win_length` marks wins."""

    __slots__ = ('rows', 'cols', 'win_length', 'gravity',
                 'state', 'outcome', 'last_move', 'winning_cells')

    CELL_STRINGS = {0: "·", 1: "X", 2: "O"}

    def __init__(self, rows: int, cols: int, win_length: int, gravity: bool = False):
        if rows < 1 or cols < 1:
            raise ValueError(f"Board must be at least 1x1, got {rows}x{cols}")
        if not 1 <= win_length <= max(rows, cols):
            raise ValueError(f"win_length {win_length} does not fit a {rows}x{cols} board")

        super().__init__()
        self.rows = rows
        self.cols = cols
        self.win_length = win_length
        self.gravity = gravity
        self._init_state()

    def _init_state(self) -> None:
        self.state = GameState.empty(self.rows, self.cols, current_player=PLAYER_ONE)
        self.outcome = Outcome.in_progress()
        self.last_move: Position | None = None
        self.winning_cells: Tuple[Position, ...] = ()

    @property
    def capacity(self) -> int:
        return self.rows * self.cols

    def get_cell_strings(self) -> dict[int, str]:
        return self.CELL_STRINGS

    def clone(self) -> "LineGame":
        g = self.__class__.__new__(self.__class__)
        g._events = self._events
        g.rows = self.rows
        g.cols = self.cols
        g.win_length = self.win_length
        g.gravity = self.gravity
        g.state = self.state
        g.outcome = self.outcome
        g.last_move = self.last_move
        g.winning_cells = self.winning_cells
        return g

    def deep_clone(self) -> "LineGame":
        g = self.clone()
        g._events = EventEmitter()
        g.state = self.state.copy()
        return g

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def landing_row(self, column: int) -> int | None:
        """Lowest empty row in `column`, scanning from the bottom."""
        board = self.state.board
        for row in range(self.rows - 1, -1, -1):
            if board[row, column] == EMPTY:
                return row
        return None

    def place(self, row: int, col: int) -> bool:
        """
        Put the current player's mark on (row, col) and evaluate the result.

        No-op (returns False) if the game is over, the cell is off the board
        or already taken.
        """
        if not (is_index(row) and is_index(col)):
            return self._reject((row, col), "malformed")
        move = Position(int(row), int(col))
        row, col = move
        if self.outcome.is_over:
            return self._reject(move, "game over")
        board = self.state.board
        if not in_bounds(board, row, col):
            return self._reject(move, "out of bounds")
        if board[row, col] != EMPTY:
            return self._reject(move, "occupied")

        player = self.state.current_player
        board[row, col] = player
        self.state.move_count += 1
        self.last_move = move

        line = find_line(board, row, col, self.win_length)
        if line:
            self.winning_cells = line
            self.outcome = Outcome.won(player)
        elif self.state.move_count == self.capacity:
            self.outcome = Outcome.draw()
        else:
            self.state.current_player = other_player(player)

        logger.debug("%s: %s -> %s", self.game_id(), self.player_name(player), move)
        self._publish("MOVE", move)
        return True

    def valid_moves(self) -> np.ndarray:
        """
        Gravity games: droppable column indices.
        Otherwise: empty cells as an (N, 2) array.
        """
        if self.outcome.is_over:
            return np.zeros(0 if self.gravity else (0, 2), dtype=np.intp)
        board = self.state.board
        if self.gravity:
            return np.flatnonzero(board[0] == EMPTY)
        return empty_cells(board)

    def apply_move(self, move) -> bool:
        """Gravity games take a column; others take (row, col)."""
        if self.gravity:
            if not is_index(move):
                return self._reject(move, "malformed")
            if not 0 <= move < self.cols:
                return self._reject(move, "out of range")
            row = self.landing_row(int(move))
            if row is None:
                return self._reject(move, "column full")
            return self.place(row, int(move))
        pair = as_pair(move)
        if pair is None:
            return self._reject(move, "malformed")
        return self.place(*pair)

    def reset(self) -> None:
        self._init_state()
        self._publish("RESET")

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def state_string(self) -> str:
        board = self.state.board
        strings = self.get_cell_strings()
        winning = set(self.winning_cells)
        width = len(str(self.cols - 1))

        lines = []
        header = " ".join(str(c).rjust(width) for c in range(self.cols))
        lines.append(("" if self.gravity else " " * (len(str(self.rows - 1)) + 1)) + header)
        for r in range(self.rows):
            cells = []
            for c in range(self.cols):
                s = strings[board[r, c]]
                if (r, c) in winning:
                    s = s.lower()
                cells.append(s.rjust(width))
            prefix = "" if self.gravity else str(r).rjust(len(str(self.rows - 1))) + " "
            lines.append(prefix + " ".join(cells))
        return "\n".join(lines)

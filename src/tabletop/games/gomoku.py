"""
Gomoku (five in a row) game implementation.

Freestyle rules on an N x N board (default 15): any run of five or more
wins. X (player 1) moves first; moves target a cell directly.
"""

from __future__ import annotations

from tabletop.games.line_game import LineGame

DEFAULT_SIZE = 15
FIVE = 5


class Gomoku(LineGame):

    __slots__ = ()

    PLAYER_NAMES = {1: "X", 2: "O"}

    def __init__(self, size: int = DEFAULT_SIZE):
        if size < FIVE:
            raise ValueError(f"Gomoku board must be at least {FIVE}x{FIVE}, got {size}")
        super().__init__(size, size, FIVE, gravity=False)

    @property
    def size(self) -> int:
        return self.rows

    def game_id(self) -> str:
        return "gomoku"

    def handle_move(self, row: int, col: int) -> bool:
        return self.place(row, col)

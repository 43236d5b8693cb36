"""
Connect Four game implementation.

6 rows x 7 columns, discs fall to the lowest empty row of the chosen
column. Row 0 is the top of the board. Red (player 1) moves first.
"""

from __future__ import annotations

from tabletop.games.game_rules import is_index
from tabletop.games.line_game import LineGame

ROWS = 6
COLUMNS = 7
CONNECT = 4


class ConnectFour(LineGame):
    """Gravity-drop four in a row."""

    __slots__ = ()

    PLAYER_NAMES = {1: "Red", 2: "Yellow"}
    CELL_STRINGS = {0: "·", 1: "R", 2: "Y"}

    def __init__(self):
        super().__init__(ROWS, COLUMNS, CONNECT, gravity=True)

    def game_id(self) -> str:
        return "connect_four"

    def can_drop(self, column: int) -> bool:
        """True while the game is in progress and `column` has room."""
        if not is_index(column):
            return False
        if self.outcome.is_over or not 0 <= column < self.cols:
            return False
        return bool(self.state.board[0, column] == 0)

    def drop_disc(self, column: int) -> bool:
        if not self.can_drop(column):
            return self._reject(column, "cannot drop")
        return self.place(self.landing_row(int(column)), int(column))

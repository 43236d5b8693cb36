"""
GameState - board snapshot container.

Optimized for fast copying.
"""

from __future__ import annotations

import numpy as np


class GameState:
    """
    Lightweight game state container.

    Uses int8 board:
        0 = empty
        1 = player 1's mark
        2 = player 2's mark
    """
    __slots__ = ('board', 'current_player', 'move_count')

    def __init__(self, board: np.ndarray, current_player: int, move_count: int = 0):
        self.board = board
        self.current_player = current_player
        self.move_count = move_count

    @classmethod
    def empty(cls, rows: int, cols: int, current_player: int = 1) -> "GameState":
        """Fresh all-empty board of the given shape."""
        return cls(np.zeros((rows, cols), dtype=np.int8), current_player)

    def copy(self) -> "GameState":
        """Fast copy - board.copy() is optimized for contiguous int arrays."""
        return GameState(self.board.copy(), self.current_player, self.move_count)

"""
Tests for tabletop.games.game_rules

Tests the shared pivot scan used by the k-in-a-row engines.
"""

import numpy as np
import pytest

from tabletop.core.types import Position
from tabletop.games.game_rules import (
    as_pair, board_full, empty_cells, find_line, in_bounds, is_index, scan_direction,
)


@pytest.fixture
def board() -> np.ndarray:
    return np.zeros((6, 7), dtype=np.int8)


class TestInBounds:

    @pytest.mark.parametrize("r, c, expected", [
        (0, 0, True), (5, 6, True), (-1, 0, False), (6, 0, False), (0, 7, False),
    ])
    def test_edges(self, board, r, c, expected):
        assert in_bounds(board, r, c) is expected


class TestScanDirection:

    def test_stops_at_other_player(self, board):
        board[2, 0:3] = 1
        board[2, 3] = 2
        assert scan_direction(board, 2, 0, 0, 1, limit=5) == [(2, 1), (2, 2)]

    def test_stops_at_edge(self, board):
        board[0, :] = 1
        assert scan_direction(board, 0, 4, 0, 1, limit=5) == [(0, 5), (0, 6)]

    def test_respects_limit(self, board):
        board[0, :] = 1
        assert len(scan_direction(board, 0, 0, 0, 1, limit=3)) == 3


class TestFindLine:

    def test_empty_pivot(self, board):
        assert find_line(board, 0, 0, 4) == ()

    def test_horizontal_ordered(self, board):
        board[5, 1:5] = 1
        assert find_line(board, 5, 3, 4) == tuple(Position(5, c) for c in range(1, 5))

    def test_short_run(self, board):
        board[5, 1:4] = 1
        assert find_line(board, 5, 2, 4) == ()

    def test_diagonal(self, board):
        for i in range(4):
            board[5 - i, i] = 2
        line = find_line(board, 3, 2, 4)
        assert set(line) == {(5, 0), (4, 1), (3, 2), (2, 3)}

    def test_first_direction_wins(self, board):
        """Horizontal is reported when the pivot completes two lines."""
        board[5, 0:4] = 1
        board[2:6, 3] = 1
        assert find_line(board, 5, 3, 4) == tuple(Position(5, c) for c in range(4))


class TestBoardHelpers:

    def test_board_full(self, board):
        assert board_full(board) is False
        board[:] = 1
        assert board_full(board) is True

    def test_empty_cells(self, board):
        board[0, 0] = 1
        cells = empty_cells(board)
        assert cells.shape == (41, 2)


class TestMoveCoercion:

    @pytest.mark.parametrize("value, expected", [
        (3, True), (np.int8(3), True), (np.intp(0), True),
        (3.0, False), ("3", False), (None, False), (True, False), (np.bool_(True), False),
    ])
    def test_is_index(self, value, expected):
        assert is_index(value) is expected

    @pytest.mark.parametrize("value, expected", [
        ((1, 2), (1, 2)),
        ([1, 2], (1, 2)),
        (np.array([3, 4]), (3, 4)),
        (Position(5, 6), (5, 6)),
    ])
    def test_as_pair_accepts(self, value, expected):
        pair = as_pair(value)
        assert pair == expected
        assert all(type(v) is int for v in pair)

    @pytest.mark.parametrize("value", ["12", b"12", (1.0, 2), (1, 2, 3), (1,), None, 5])
    def test_as_pair_rejects(self, value):
        assert as_pair(value) is None

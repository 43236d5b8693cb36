"""
NumPy utilities shared by the grid games.

The central primitive is the pivot scan: count contiguous same-owner cells
along a direction pair from the cell that was just played.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from tabletop.core.types import DIRECTIONS, EMPTY, Position


def is_index(value) -> bool:
    """True for Python or numpy integers (bools excluded)."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def as_pair(value) -> Tuple[int, int] | None:
    """Return `value` as an (int, int) pair, or None if it is not one."""
    if isinstance(value, (str, bytes)):
        return None
    try:
        a, b = value
    except (TypeError, ValueError):
        return None
    if not (is_index(a) and is_index(b)):
        return None
    return int(a), int(b)


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def scan_direction(
    board: np.ndarray, r: int, c: int, dr: int, dc: int, limit: int
) -> List[Position]:
    """
    Walk from (r, c) in direction (dr, dc), at most `limit` steps.

    Collects cells owned by the same player as the pivot and stops at the
    board edge or the first non-matching (or empty) cell. The pivot itself
    is not included.
    """
    player = board[r, c]
    cells = []
    for step in range(1, limit + 1):
        nr, nc = r + step * dr, c + step * dc
        if not in_bounds(board, nr, nc) or board[nr, nc] != player:
            break
        cells.append(Position(nr, nc))
    return cells


def find_line(board: np.ndarray, r: int, c: int, win_length: int) -> Tuple[Position, ...]:
    """
    Return the contiguous run through (r, c) of at least `win_length` cells.

    Checks horizontal, vertical and both diagonals in that order and returns
    the first qualifying run, ordered from one end to the other. Returns an
    empty tuple when the pivot is empty or no direction reaches the length.
    """
    if board[r, c] == EMPTY:
        return ()

    reach = win_length - 1
    for dr, dc in DIRECTIONS:
        backward = scan_direction(board, r, c, -dr, -dc, reach)
        forward = scan_direction(board, r, c, dr, dc, reach)
        if len(backward) + 1 + len(forward) >= win_length:
            return tuple(reversed(backward)) + (Position(r, c),) + tuple(forward)
    return ()


def board_full(board: np.ndarray) -> bool:
    """Return True if no cell is empty."""
    return not np.any(board == EMPTY)


def empty_cells(board: np.ndarray) -> np.ndarray:
    """Empty cell positions as an (N, 2) array."""
    return np.argwhere(board == EMPTY)

"""
Core types and constants shared by every engine.

This module contains the fundamental types used throughout the engines:
- Cell marks and player identities (int8 encoded)
- GameStatus / Outcome: the unified terminal-condition sum type
- State: per-player result reporting
- Position: (row, col) coordinates for cells, edges and boxes
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple


# ─── Cell marks ───────────────────────────────────────────────────────────────

EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2

PLAYERS = (PLAYER_ONE, PLAYER_TWO)


def other_player(player: int) -> int:
    """Return the opponent of `player` (toggle 1↔2)."""
    return 3 - player


# ─── Status ───────────────────────────────────────────────────────────────────

class GameStatus(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()


class State(Enum):
    """Result of a game from one player's point of view."""
    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


class Outcome(NamedTuple):
    """
    Game status with the winning player attached.

    `winner` is EMPTY unless status is WON. WON and DRAW are absorbing:
    engines never leave them except through reset().
    """

    status: GameStatus = GameStatus.IN_PROGRESS
    winner: int = EMPTY

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS, EMPTY)

    @classmethod
    def won(cls, player: int) -> "Outcome":
        return cls(GameStatus.WON, player)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW, EMPTY)

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    def result_for(self, player: int) -> State:
        """Translate the outcome into WIN / TIE / LOSS / NEUTRAL for `player`."""
        if self.status is GameStatus.WON:
            return State.WIN if self.winner == player else State.LOSS
        if self.status is GameStatus.DRAW:
            return State.TIE
        return State.NEUTRAL


# ─── Coordinates ──────────────────────────────────────────────────────────────

class Position(NamedTuple):
    row: int
    col: int


# Undirected scan directions (dr, dc): horizontal, vertical, diagonal \, diagonal /
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

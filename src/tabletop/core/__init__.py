"""
Core module - fundamental types and state-changed notifications.

This module provides the building blocks shared by every engine.
"""

from tabletop.core.types import (
    EMPTY,
    PLAYER_ONE,
    PLAYER_TWO,
    PLAYERS,
    DIRECTIONS,
    GameStatus,
    Outcome,
    Position,
    State,
    other_player,
)
from tabletop.core.events import EventEmitter, GameEvent

__all__ = [
    # Constants
    "EMPTY",
    "PLAYER_ONE",
    "PLAYER_TWO",
    "PLAYERS",
    "DIRECTIONS",
    # Types
    "GameStatus",
    "Outcome",
    "Position",
    "State",
    "GameEvent",
    "EventEmitter",
    # Functions
    "other_player",
]

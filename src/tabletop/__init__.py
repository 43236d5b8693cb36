"""
Tabletop - authoritative state engines for two-player board games.

Each engine owns its board, validates moves, and decides after every move
whether play continues, a player has won, or the game is drawn.

Quick Start:
    from tabletop import ConnectFour

    game = ConnectFour()
    game.subscribe(lambda event: print(event.kind, event.outcome))
    game.drop_disc(3)
    print(game.state_string())

Modules:
    core   - Player constants, Outcome/GameStatus, Position, GameEvent
    games  - TicTacToe, ConnectFour, Gomoku, DotsAndBoxes and shared grid rules
    utils  - Game registry, configuration and factory
"""

from tabletop.core import GameEvent, GameStatus, Outcome, Position, State
from tabletop.games import (
    ConnectFour,
    DotsAndBoxes,
    GameBase,
    Gomoku,
    Orientation,
    TicTacToe,
)
from tabletop.utils.factory import create_game

__version__ = "1.0.0"

__all__ = [
    # Engines
    "TicTacToe",
    "ConnectFour",
    "Gomoku",
    "DotsAndBoxes",
    "GameBase",
    "create_game",
    # Types
    "GameEvent",
    "GameStatus",
    "Orientation",
    "Outcome",
    "Position",
    "State",
]

"""
Shared test fixtures for tabletop tests.

Design principles:
- Game-agnostic fixtures where possible
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import Callable, List

import pytest

from tabletop.core.events import GameEvent
from tabletop.games.connect_four import ConnectFour
from tabletop.games.dots_and_boxes import DotsAndBoxes
from tabletop.games.game_base import GameBase
from tabletop.games.gomoku import Gomoku
from tabletop.games.tic_tac_toe import TicTacToe


# =============================================================================
# Game Fixtures (Game-Agnostic)
# =============================================================================

ENGINE_FACTORIES: dict[str, Callable[[], GameBase]] = {
    "tic_tac_toe": TicTacToe,
    "connect_four": ConnectFour,
    "gomoku": Gomoku,
    "dots_and_boxes": DotsAndBoxes,
}


@pytest.fixture(params=list(ENGINE_FACTORIES))
def any_game(request) -> GameBase:
    """Each engine in turn, freshly constructed."""
    return ENGINE_FACTORIES[request.param]()


@pytest.fixture
def finished_game(any_game: GameBase) -> GameBase:
    """Each engine played to a terminal state using its first legal move."""
    while not any_game.is_over():
        moves = any_game.valid_moves()
        any_game.apply_move(moves[0])
    return any_game


# =============================================================================
# Event Fixtures
# =============================================================================

@pytest.fixture
def recorder() -> List[GameEvent]:
    """List that collects events when used as a listener via .append."""
    return []

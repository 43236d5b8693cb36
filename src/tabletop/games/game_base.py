"""
GameBase - abstract base class for all board games.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from tabletop.core.events import EventEmitter, GameEvent, Listener
from tabletop.core.types import GameStatus, Outcome, State
from tabletop.games.game_state import GameState

logger = logging.getLogger(__name__)


class GameBase(ABC):
    """
    Abstract base class for all board games.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - The engine is the only writer of its state.
    - State changes only through apply_move() (or the game's named move
      method) and reset().
    - Invalid moves are ignored: they return False and change nothing.
    - Presentation code reads state and subscribes to GameEvents.

    Subclasses keep `state`, `outcome` and `last_move` current.
    """

    PLAYER_NAMES: Dict[int, str] = {1: "Player 1", 2: "Player 2"}

    state: GameState
    outcome: Outcome
    last_move: Any

    def __init__(self):
        self._events = EventEmitter()

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'tic_tac_toe')."""
        pass

    @abstractmethod
    def clone(self) -> "GameBase":
        """Shallow copy (shares board and listeners)."""
        pass

    @abstractmethod
    def deep_clone(self) -> "GameBase":
        """
        Independent copy of game + state, without listeners.
        Safe to hand to a renderer while play continues.
        """
        pass

    @abstractmethod
    def valid_moves(self) -> Any:
        """
        Return all legal moves from the current state.
        Empty once the game is over.
        """
        pass

    @abstractmethod
    def apply_move(self, move: Any) -> bool:
        """
        Apply a move to the game. Mutates internal state.

        Returns:
            True if the move was accepted, False if it was ignored.
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """Restore the initial empty board, first player and IN_PROGRESS."""
        pass

    @abstractmethod
    def get_cell_strings(self) -> dict[int, str]:
        """
        Return a dictionary of [int -> str] where each cell value maps to its display string
            (e.g. {0: " ", 1: "X", 2: "O"} for tic_tac_toe)
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass

    # ------------------------------------------------------------------
    # Shared read API
    # ------------------------------------------------------------------

    def num_players(self) -> int:
        return 2

    def get_state(self) -> GameState:
        return self.state

    def current_player(self) -> int:
        return self.state.current_player

    @property
    def move_count(self) -> int:
        return self.state.move_count

    @property
    def status(self) -> GameStatus:
        return self.outcome.status

    @property
    def winner(self) -> int:
        """Winning player, or 0 while in progress or drawn."""
        return self.outcome.winner

    def is_over(self) -> bool:
        return self.outcome.is_over

    def get_result(self, player: int) -> State:
        """
        Return result for the player:
            WIN / TIE / NEUTRAL / LOSS
        """
        return self.outcome.result_for(player)

    def player_name(self, player: int) -> str:
        return self.PLAYER_NAMES[player]

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        """Call `listener(event)` after every accepted move and every reset."""
        self._events.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._events.unsubscribe(listener)

    def _publish(self, kind: str, move: Any = None) -> None:
        if kind == "MOVE" and self.outcome.is_over:
            if self.outcome.status is GameStatus.WON:
                logger.info("%s: %s wins after %d moves",
                            self.game_id(), self.player_name(self.winner), self.move_count)
            else:
                logger.info("%s: draw after %d moves", self.game_id(), self.move_count)
        elif kind == "RESET":
            logger.info("%s: reset", self.game_id())

        self._events.emit(GameEvent(
            kind=kind,
            game_id=self.game_id(),
            move=move,
            outcome=self.outcome,
            move_count=self.move_count,
        ))

    def _reject(self, move: Any, reason: str) -> bool:
        logger.debug("%s: ignored move %r (%s)", self.game_id(), move, reason)
        return False

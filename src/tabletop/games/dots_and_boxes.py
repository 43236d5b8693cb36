"""
Dots and Boxes game implementation.

Coordinates live on a logical grid of (2 * grid_size + 1) lines:

    (even, even)  dot
    (even, odd)   horizontal edge
    (odd, even)   vertical edge
    (odd, odd)    box interior

Box (r, c) is bounded by edges
    top    (2r,     2c + 1)  horizontal
    bottom (2r + 2, 2c + 1)  horizontal
    left   (2r + 1, 2c)      vertical
    right  (2r + 1, 2c + 2)  vertical

Completing at least one box earns the mover another turn.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Tuple

import numpy as np

from tabletop.core.events import EventEmitter
from tabletop.core.types import EMPTY, PLAYER_ONE, PLAYER_TWO, PLAYERS, Outcome, Position, other_player
from tabletop.games.game_base import GameBase
from tabletop.games.game_rules import as_pair, board_full
from tabletop.games.game_state import GameState

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = 4


class Orientation(Enum):
    HORIZONTAL = "h"
    VERTICAL = "v"


EdgeMove = Tuple[Position, Orientation]


def box_edges(box: Position) -> Tuple[Position, Position, Position, Position]:
    """Return (top, bottom, left, right) edge coordinates of a box."""
    r, c = box
    return (
        Position(2 * r, 2 * c + 1),
        Position(2 * r + 2, 2 * c + 1),
        Position(2 * r + 1, 2 * c),
        Position(2 * r + 1, 2 * c + 2),
    )


def next_player(player: int, completed: Tuple[Position, ...]) -> int:
    """The mover keeps the turn iff they completed a box."""
    return player if completed else other_player(player)


class DotsAndBoxes(GameBase):
    """
    Dots and Boxes on a grid_size x grid_size field of boxes.

    Edge ownership is kept in two dicts (horizontal and vertical) keyed by
    logical-grid Position. `state.board` holds box ownership, one cell per
    box; `state.move_count` counts edges drawn.
    """

    __slots__ = ('grid_size', 'horizontal_edges', 'vertical_edges', 'scores',
                 'state', 'outcome', 'last_move', 'last_completed_boxes')

    CELL_STRINGS = {0: " ", 1: "1", 2: "2"}

    def __init__(self, grid_size: int = DEFAULT_GRID_SIZE):
        if grid_size < 1:
            raise ValueError(f"grid_size must be at least 1, got {grid_size}")
        super().__init__()
        self.grid_size = grid_size
        self._init_state()

    def _init_state(self) -> None:
        self.horizontal_edges: Dict[Position, int] = {}
        self.vertical_edges: Dict[Position, int] = {}
        self.scores: Dict[int, int] = {player: 0 for player in PLAYERS}
        self.state = GameState.empty(self.grid_size, self.grid_size, current_player=PLAYER_ONE)
        self.outcome = Outcome.in_progress()
        self.last_move: EdgeMove | None = None
        self.last_completed_boxes: Tuple[Position, ...] = ()

    def game_id(self) -> str:
        return "dots_and_boxes"

    def get_cell_strings(self) -> dict[int, str]:
        return self.CELL_STRINGS

    @property
    def box_owners(self) -> np.ndarray:
        return self.state.board

    @property
    def total_edges(self) -> int:
        return 2 * self.grid_size * (self.grid_size + 1)

    def clone(self) -> "DotsAndBoxes":
        g = DotsAndBoxes.__new__(DotsAndBoxes)
        g._events = self._events
        g.grid_size = self.grid_size
        g.horizontal_edges = self.horizontal_edges
        g.vertical_edges = self.vertical_edges
        g.scores = self.scores
        g.state = self.state
        g.outcome = self.outcome
        g.last_move = self.last_move
        g.last_completed_boxes = self.last_completed_boxes
        return g

    def deep_clone(self) -> "DotsAndBoxes":
        g = self.clone()
        g._events = EventEmitter()
        g.horizontal_edges = dict(self.horizontal_edges)
        g.vertical_edges = dict(self.vertical_edges)
        g.scores = dict(self.scores)
        g.state = self.state.copy()
        return g

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def is_edge(self, edge: Position, orientation: Orientation) -> bool:
        """True if `edge` is an edge slot of the given orientation on this grid."""
        r, c = edge
        span = 2 * self.grid_size
        if not (0 <= r <= span and 0 <= c <= span):
            return False
        if orientation is Orientation.HORIZONTAL:
            return r % 2 == 0 and c % 2 == 1
        return r % 2 == 1 and c % 2 == 0

    def _edges(self, orientation: Orientation) -> Dict[Position, int]:
        if orientation is Orientation.HORIZONTAL:
            return self.horizontal_edges
        return self.vertical_edges

    def edge_owner(self, edge: Position, orientation: Orientation) -> int:
        return self._edges(orientation).get(Position(*edge), EMPTY)

    def valid_moves(self) -> List[EdgeMove]:
        if self.outcome.is_over:
            return []
        span = 2 * self.grid_size + 1
        moves = []
        for r in range(span):
            for c in range(span):
                edge = Position(r, c)
                if (r + c) % 2 == 0:
                    continue
                orientation = Orientation.HORIZONTAL if r % 2 == 0 else Orientation.VERTICAL
                if edge not in self._edges(orientation):
                    moves.append((edge, orientation))
        return moves

    def apply_move(self, move) -> bool:
        """
        Move is an (edge, orientation) pair; orientation may be an
        Orientation or its value ("h" / "v").
        """
        if isinstance(move, (str, bytes)):
            return self._reject(move, "malformed")
        try:
            edge, orientation = move
        except (TypeError, ValueError):
            return self._reject(move, "malformed")
        return self.place_edge(edge, orientation)

    def place_edge(self, edge: Position, orientation: Orientation) -> bool:
        """
        Draw `edge` for the current player.

        No-op (returns False) if the game is over, the coordinate is not an
        edge of that orientation, or the edge is already drawn.
        """
        pair = as_pair(edge)
        if pair is None:
            return self._reject(edge, "malformed edge")
        try:
            orientation = Orientation(orientation)
        except (TypeError, ValueError):
            return self._reject(orientation, "unknown orientation")
        edge = Position(*pair)
        kind = orientation.name.lower()

        if self.outcome.is_over:
            return self._reject(edge, "game over")
        if not self.is_edge(edge, orientation):
            return self._reject(edge, f"not a {kind} edge")
        edges = self._edges(orientation)
        if edge in edges:
            return self._reject(edge, "already drawn")

        player = self.state.current_player
        edges[edge] = player
        self.state.move_count += 1
        self.last_move = (edge, orientation)

        completed = self._complete_boxes(player)
        self.last_completed_boxes = completed

        if board_full(self.state.board):
            self.outcome = self._final_outcome()
        else:
            self.state.current_player = next_player(player, completed)

        logger.debug("%s: player %d drew %s %s, completed %d box(es)",
                     self.game_id(), player, kind, edge, len(completed))
        self._publish("MOVE", (edge, orientation))
        return True

    # ------------------------------------------------------------------
    # Boxes
    # ------------------------------------------------------------------

    def _box_complete(self, box: Position) -> bool:
        top, bottom, left, right = box_edges(box)
        return (
            top in self.horizontal_edges
            and bottom in self.horizontal_edges
            and left in self.vertical_edges
            and right in self.vertical_edges
        )

    def _complete_boxes(self, player: int) -> Tuple[Position, ...]:
        """Claim every unowned box whose four edges are drawn. Returns the new boxes."""
        owners = self.state.board
        completed = []
        for r, c in np.argwhere(owners == EMPTY):
            box = Position(int(r), int(c))
            if self._box_complete(box):
                owners[box] = player
                self.scores[player] += 1
                completed.append(box)
        return tuple(completed)

    def _final_outcome(self) -> Outcome:
        one, two = self.scores[PLAYER_ONE], self.scores[PLAYER_TWO]
        if one > two:
            return Outcome.won(PLAYER_ONE)
        if two > one:
            return Outcome.won(PLAYER_TWO)
        return Outcome.draw()

    def reset(self) -> None:
        self._init_state()
        self._publish("RESET")

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def logical_grid(self) -> np.ndarray:
        """
        (2n+1) x (2n+1) int8 view of the whole field: edge slots hold the
        edge owner, box slots the box owner, dots are 0.
        """
        span = 2 * self.grid_size + 1
        grid = np.zeros((span, span), dtype=np.int8)
        for (r, c), owner in self.horizontal_edges.items():
            grid[r, c] = owner
        for (r, c), owner in self.vertical_edges.items():
            grid[r, c] = owner
        grid[1::2, 1::2] = self.state.board
        return grid

    def state_string(self) -> str:
        grid = self.logical_grid()
        span = grid.shape[0]
        header = "".join(str(c % 10).center(3 if c % 2 else 1) for c in range(span))
        lines = ["   " + header]
        for r in range(span):
            row = []
            for c in range(span):
                value = grid[r, c]
                if r % 2 == 0 and c % 2 == 0:
                    row.append("•")
                elif r % 2 == 0:
                    row.append("───" if value else "   ")
                elif c % 2 == 0:
                    row.append("│" if value else " ")
                else:
                    row.append(self.CELL_STRINGS[value].center(3))
            lines.append(str(r).rjust(2) + " " + "".join(row))
        lines.append(f"Scores: 1={self.scores[PLAYER_ONE]}  2={self.scores[PLAYER_TWO]}")
        return "\n".join(lines)

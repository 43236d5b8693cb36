"""
State-changed notifications for presentation layers.

Engines publish a GameEvent after every accepted move and every reset.
Rejected moves publish nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Literal

from tabletop.core.types import Outcome

logger = logging.getLogger(__name__)

EventKind = Literal["MOVE", "RESET"]


@dataclass(frozen=True, slots=True)
class GameEvent:
    kind: EventKind
    game_id: str
    move: Any
    outcome: Outcome
    move_count: int


Listener = Callable[[GameEvent], None]


class EventEmitter:
    """Ordered listener registry. A failing listener never blocks the others."""

    __slots__ = ("_listeners",)

    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: GameEvent) -> None:
        for listener in self._listeners[:]:
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed on %s event", listener, event.kind)

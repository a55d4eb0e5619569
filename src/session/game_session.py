"""
Pip Stack - Game Session

Owning handle around a Game for host applications. The session holds the
only reference to the Game, serializes every call with a lock and notifies
subscribers after each applied action.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Callable

from src.engine.actions import Action
from src.engine.base import Color, Die, Position
from src.engine.game import Game
from src.session.events import EventPayload, GameEvent, build_events

logger = logging.getLogger(__name__)

Subscriber = Callable[[EventPayload], None]


@dataclass(frozen=True)
class GameSnapshot:
    """Point-in-time copy of the public game state."""

    board: dict[Position, Die]
    turn: Color
    winner: Color | None
    actions: frozenset[Action]

    @property
    def is_finished(self) -> bool:
        return self.winner is not None


class GameSession:
    """Thread-safe owner of a single Game."""

    def __init__(self, game: Game | None = None, session_id: str | None = None) -> None:
        self.session_id = session_id or uuid.uuid4().hex
        self._game = game or Game()
        self._lock = threading.Lock()
        self._subscribers: list[Subscriber] = []

    def state(self) -> GameSnapshot:
        """Copy the current state under the lock."""
        with self._lock:
            return GameSnapshot(
                board=dict(self._game.board),
                turn=self._game.turn,
                winner=self._game.winner,
                actions=self._game.actions,
            )

    def perform(self, action: Action) -> Color | None:
        """Apply an action and notify subscribers.

        Args:
            action: One of the currently legal actions.

        Returns:
            The winner after this action, or None.

        Raises:
            InvalidActionError: If the action is not currently legal.
            GameAlreadyFinishedError: If the game already has a winner.
        """
        with self._lock:
            mover = self._game.turn
            winner = self._game.perform_action(action)
            events = build_events(self.session_id, action, mover, winner, self._game.turn)

        self._emit(events)
        return winner

    def reset(self) -> None:
        """Start a fresh game in this session."""
        with self._lock:
            self._game = Game()
            turn = self._game.turn
        logger.info("Session %s started a new game", self.session_id)
        self._emit([EventPayload(event=GameEvent.GAME_STARTED, session_id=self.session_id, color=turn)])

    # -- Subscribers -----------------------------------------------------

    def subscribe(self, callback: Subscriber) -> None:
        """Register a callback for every emitted event."""
        if callback in self._subscribers:
            logger.warning("Callback already subscribed to session %s", self.session_id)
            return
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        """Remove a previously registered callback."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _emit(self, events: list[EventPayload]) -> None:
        for payload in events:
            for callback in list(self._subscribers):
                try:
                    callback(payload)
                except Exception:
                    logger.exception(
                        "Subscriber failed handling %s for session %s",
                        payload.event.name,
                        self.session_id,
                    )

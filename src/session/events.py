"""
Pip Stack - Session Event Definitions

Event types and payloads emitted to a presentation layer as the game
advances.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from src.engine.actions import Action, AddAction, MergeAction, MoveAction
from src.engine.base import Color


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    STACK_ADDED = auto()
    STACKS_MERGED = auto()
    STACK_MOVED = auto()
    GAME_WON = auto()


@dataclass
class EventPayload:
    """Wrapper for session event data."""

    event: GameEvent
    session_id: str
    color: Color | None = None
    data: dict[str, Any] = field(default_factory=dict)


_ACTION_EVENT_MAP: dict[type, GameEvent] = {
    AddAction: GameEvent.STACK_ADDED,
    MergeAction: GameEvent.STACKS_MERGED,
    MoveAction: GameEvent.STACK_MOVED,
}


def classify_action(action: Action) -> GameEvent:
    """Determine the game event for an applied action."""
    return _ACTION_EVENT_MAP[type(action)]


def build_events(
    session_id: str,
    action: Action,
    mover: Color,
    winner: Color | None,
    turn_after: Color,
) -> list[EventPayload]:
    """Payloads for one applied action, in emission order.

    An overflow win is the only way to win without the turn passing.
    """
    events = [
        EventPayload(
            event=classify_action(action),
            session_id=session_id,
            color=mover,
            data={"action": action},
        )
    ]
    if winner is not None:
        events.append(
            EventPayload(
                event=GameEvent.GAME_WON,
                session_id=session_id,
                color=winner,
                data={"overflow": turn_after is mover},
            )
        )
    return events

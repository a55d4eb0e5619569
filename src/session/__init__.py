"""
Pip Stack Session Handle.

Lock-serialized ownership of a Game and event notifications for the
presentation layer.
"""

from src.session.events import EventPayload, GameEvent
from src.session.game_session import GameSession, GameSnapshot

__all__ = [
    "EventPayload",
    "GameEvent",
    "GameSession",
    "GameSnapshot",
]

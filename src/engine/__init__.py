"""
Pip Stack Game Engine.

Pure Python rule engine with zero UI dependencies.
Handles legal action generation, stacking, sliding and victory detection.
"""

from src.engine.actions import (
    Action,
    AddAction,
    MergeAction,
    MoveAction,
    action_origin,
    action_target,
)
from src.engine.base import Color, Die, Position
from src.engine.errors import EngineError, GameAlreadyFinishedError, InvalidActionError
from src.engine.game import Game

__all__ = [
    # Data Classes
    "Die",
    "Position",
    # Enums
    "Color",
    # Actions
    "Action",
    "AddAction",
    "MergeAction",
    "MoveAction",
    "action_origin",
    "action_target",
    # Errors
    "EngineError",
    "GameAlreadyFinishedError",
    "InvalidActionError",
    # Controller
    "Game",
]

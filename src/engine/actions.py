"""
Pip Stack - Action Types

The three things a player can do on their turn. Actions are plain frozen
values; the Game matches on their type to apply them.
"""

from dataclasses import dataclass

from src.engine.base import Position


@dataclass(frozen=True)
class AddAction:
    """Place a new value-1 stack on an empty cell."""
    pos: Position


@dataclass(frozen=True)
class MergeAction:
    """Lift the stack at ``origin`` onto the friendly stack at ``target``."""
    origin: Position
    target: Position


@dataclass(frozen=True)
class MoveAction:
    """Slide the stack at ``origin`` to the empty cell ``target``."""
    origin: Position
    target: Position


Action = AddAction | MergeAction | MoveAction


def action_origin(action: Action) -> Position | None:
    """Cell a Merge or Move starts from; None for placements."""
    if isinstance(action, (MergeAction, MoveAction)):
        return action.origin
    return None


def action_target(action: Action) -> Position:
    """Cell the action puts a stack on."""
    if isinstance(action, AddAction):
        return action.pos
    return action.target

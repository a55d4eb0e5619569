"""
Pip Stack - Action Generator

Enumerates every legal action for the player to move. The set is rebuilt
from scratch on each call; nothing is patched incrementally.
"""

from typing import Mapping

from src.engine.actions import Action, AddAction, MergeAction, MoveAction
from src.engine.base import Color
from src.engine.board import Board
from src.engine.connectivity import is_free
from src.engine.slide import reachable

# Most stacks a color may have in play at once
MAX_STACKS = 6


def add_actions(board: Board, color: Color, in_play: int) -> set[AddAction]:
    """
    Placements next to a friendly stack and away from every enemy stack.

    Args:
        board: Current board
        color: Color to move
        in_play: Stacks of ``color`` currently in play

    Returns:
        Legal AddActions (empty once the color has MAX_STACKS in play)
    """
    if in_play >= MAX_STACKS:
        return set()

    actions = set()
    for pos in board.positions_of(color):
        for candidate in pos.orthogonal_neighbors():
            if not board.is_empty(candidate):
                continue
            touches_enemy = any(
                (die := board.get(n)) is not None and die.color is not color
                for n in candidate.orthogonal_neighbors()
            )
            if not touches_enemy:
                actions.add(AddAction(candidate))
    return actions


def merge_actions(board: Board, color: Color) -> set[MergeAction]:
    """Free friendly stacks lifted onto an orthogonally adjacent friendly stack."""
    occupied = board.occupied()
    actions = set()
    for origin in board.positions_of(color):
        if not is_free(occupied, origin):
            continue
        for target in origin.orthogonal_neighbors():
            die = board.get(target)
            if die is not None and die.color is color:
                actions.add(MergeAction(origin, target))
    return actions


def move_actions(board: Board, color: Color) -> set[MoveAction]:
    """Free friendly stacks slid exactly as many steps as their pip value."""
    occupied = board.occupied()
    actions = set()
    for origin in board.positions_of(color):
        if not is_free(occupied, origin):
            continue
        die = board.get(origin)
        assert die is not None
        for target in reachable(occupied, origin, die.value):
            actions.add(MoveAction(origin, target))
    return actions


def legal_actions(board: Board, color: Color, dice_in_play: Mapping[Color, int]) -> frozenset[Action]:
    """
    Every legal action for ``color``.

    Args:
        board: Current board
        color: Color to move
        dice_in_play: Stacks in play per color

    Returns:
        Unordered set of Add, Merge and Move actions
    """
    actions: set[Action] = set()
    actions |= add_actions(board, color, dice_in_play[color])
    actions |= merge_actions(board, color)
    actions |= move_actions(board, color)
    return frozenset(actions)

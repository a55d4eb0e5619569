"""
Pip Stack - Slide Stepper

Movement rules for a stack sliding across the table. A stack moves like a
physical disc pushed along the other stacks:

- Diagonal step: the target cell must be empty and exactly one of the two
  shoulder cells it passes between must be occupied. Two occupied shoulders
  block the gap; two empty shoulders leave nothing to slide along.
- Orthogonal step: the target cell must be empty and at least one of the two
  brace cells (the origin's diagonals flanking the target) must be occupied.

All functions work on a set of occupied positions. Callers moving a stack
pass the set with the stack's own cell removed.
"""

from typing import AbstractSet

from src.engine.base import DIAGONAL_OFFSETS, ORTHOGONAL_OFFSETS, Position


def can_step(occupied: AbstractSet[Position], origin: Position, dx: int, dy: int) -> bool:
    """
    Check whether a single slide step from ``origin`` by (dx, dy) is legal.

    Args:
        occupied: Occupied positions (excluding the moving stack)
        origin: Cell the stack currently sits on
        dx: Horizontal offset, -1/0/1
        dy: Vertical offset, -1/0/1

    Returns:
        True if the step obeys the shoulder/brace rules
    """
    target = origin.offset(dx, dy)
    if target in occupied:
        return False

    if dx != 0 and dy != 0:
        shoulder_x = origin.offset(dx, 0) in occupied
        shoulder_y = origin.offset(0, dy) in occupied
        return shoulder_x != shoulder_y

    if dx != 0:
        braces = (origin.offset(dx, 1), origin.offset(dx, -1))
    elif dy != 0:
        braces = (origin.offset(1, dy), origin.offset(-1, dy))
    else:
        return False
    return any(brace in occupied for brace in braces)


def slide_steps(occupied: AbstractSet[Position], origin: Position) -> set[Position]:
    """All cells reachable from ``origin`` by exactly one slide step."""
    return {
        origin.offset(dx, dy)
        for dx, dy in ORTHOGONAL_OFFSETS + DIAGONAL_OFFSETS
        if can_step(occupied, origin, dx, dy)
    }


def reachable(occupied: AbstractSet[Position], origin: Position, distance: int) -> set[Position]:
    """
    Cells a stack at ``origin`` can end on after exactly ``distance`` steps.

    The stack's own cell is treated as empty throughout. Paths may double
    back, so the origin can show up mid-way; it is never a destination.

    Args:
        occupied: All occupied positions, the origin included or not
        origin: Cell of the moving stack
        distance: Number of slide steps (the stack's pip value)

    Returns:
        Destination cells, excluding the origin
    """
    others = frozenset(occupied) - {origin}
    frontier = {origin}
    for _ in range(distance):
        frontier = set().union(*(slide_steps(others, pos) for pos in frontier))
        if not frontier:
            break
    frontier.discard(origin)
    return frontier

"""
Pip Stack - Connectivity Oracle

A stack may only act (merge or move) if lifting it off the board keeps the
remaining stacks in one orthogonally connected group.
"""

from collections import deque
from typing import AbstractSet

from src.engine.base import Position


def is_free(occupied: AbstractSet[Position], pos: Position) -> bool:
    """
    Check whether an occupied cell can be lifted without splitting the board.

    Runs a breadth-first search over orthogonal adjacency, seeded from one
    occupied neighbor of ``pos``, with ``pos`` itself pre-marked as visited
    so the search never passes through it.

    Args:
        occupied: All occupied positions (must include ``pos``)
        pos: The cell to test

    Returns:
        True if every other occupied cell is reached from the seed
    """
    if pos not in occupied:
        return False

    seed = next((n for n in pos.orthogonal_neighbors() if n in occupied), None)
    if seed is None:
        return False

    visited = {pos, seed}
    queue = deque([seed])
    while queue:
        current = queue.popleft()
        for neighbor in current.orthogonal_neighbors():
            if neighbor in occupied and neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return len(visited) == len(occupied)

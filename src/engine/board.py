"""
Pip Stack - Board State

Sparse mapping from grid position to die. The board never stores more than
one die per position and never holds a die whose value is out of range
(enforced by Die itself).
"""

from types import MappingProxyType
from typing import Iterator, Mapping

from src.engine.base import Color, Die, Position


class Board:
    """Mutable sparse board owned by a single Game."""

    def __init__(self, dice: Mapping[Position, Die] | None = None) -> None:
        self._dice: dict[Position, Die] = {}
        for pos, die in (dice or {}).items():
            self.place(pos, die)

    def __len__(self) -> int:
        return len(self._dice)

    def __contains__(self, pos: object) -> bool:
        return pos in self._dice

    def __iter__(self) -> Iterator[Position]:
        return iter(self._dice)

    def get(self, pos: Position) -> Die | None:
        """Die at the position, or None if the cell is empty."""
        return self._dice.get(pos)

    def is_empty(self, pos: Position) -> bool:
        return pos not in self._dice

    def occupied(self) -> frozenset[Position]:
        """All occupied positions."""
        return frozenset(self._dice)

    def positions_of(self, color: Color) -> list[Position]:
        """Positions holding a die of the given color."""
        return [pos for pos, die in self._dice.items() if die.color is color]

    def count(self, color: Color) -> int:
        return len(self.positions_of(color))

    def pip_sum(self) -> int:
        """Total of all die values on the board."""
        return sum(die.value for die in self._dice.values())

    def view(self) -> Mapping[Position, Die]:
        """Read-only live view of the board."""
        return MappingProxyType(self._dice)

    # -- Mutation (used by Game only) ------------------------------------

    def place(self, pos: Position, die: Die) -> None:
        """Put a die on an empty cell."""
        if not isinstance(pos, Position):
            raise ValueError(f"Board keys must be Position, got {type(pos).__name__}.")
        if not isinstance(die, Die):
            raise ValueError(f"Board values must be Die, got {type(die).__name__}.")
        if pos in self._dice:
            raise ValueError(f"Position {pos} is already occupied.")
        self._dice[pos] = die

    def remove(self, pos: Position) -> Die:
        """Take the die off a cell and return it."""
        die = self._dice.pop(pos, None)
        assert die is not None, f"no die at {pos}"
        return die

    def replace(self, pos: Position, die: Die) -> None:
        """Swap the die on an occupied cell."""
        assert pos in self._dice, f"no die at {pos}"
        self._dice[pos] = die

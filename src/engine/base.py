"""
Pip Stack - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine: board positions, player colors and dice. All classes are
immutable (frozen dataclasses) so they can be used as dictionary keys and
set members.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterator


class Color(Enum):
    """The two players. RED moves first."""
    RED = "red"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        """The other color."""
        return Color.BLACK if self is Color.RED else Color.RED


# Orthogonal offsets, used for placement, merging and connectivity
ORTHOGONAL_OFFSETS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

# Diagonal offsets, used together with ORTHOGONAL_OFFSETS for sliding
DIAGONAL_OFFSETS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))


@dataclass(frozen=True)
class Position:
    """
    A cell on the unbounded square grid.

    Attributes:
        x: Column coordinate (grows to the right)
        y: Row coordinate (grows upwards)
    """
    x: int
    y: int

    def __post_init__(self) -> None:
        """Validate coordinates are integers."""
        for name in ("x", "y"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(
                    f"Position {name} must be an integer, got {type(value).__name__}."
                )

    def offset(self, dx: int, dy: int) -> "Position":
        """Return the position shifted by (dx, dy)."""
        return Position(self.x + dx, self.y + dy)

    def orthogonal_neighbors(self) -> Iterator["Position"]:
        """Yield the 4 orthogonally adjacent positions."""
        for dx, dy in ORTHOGONAL_OFFSETS:
            yield self.offset(dx, dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Die:
    """
    A stack of unit pieces of one color.

    Attributes:
        color: Owner of the stack
        value: Number of pieces in the stack (1-6), also its slide distance
    """
    color: Color
    value: int = 1

    MIN_VALUE: ClassVar[int] = 1
    MAX_VALUE: ClassVar[int] = 6

    def __post_init__(self) -> None:
        """Validate die value is within valid range."""
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueError(f"Die value must be an integer, got {type(self.value).__name__}.")
        if not (self.MIN_VALUE <= self.value <= self.MAX_VALUE):
            raise ValueError(
                f"Invalid die value {self.value}. "
                f"Must be between {self.MIN_VALUE} and {self.MAX_VALUE}."
            )

    def __str__(self) -> str:
        return f"{self.color.value}:{self.value}"

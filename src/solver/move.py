"""
Move Module - Directions and the group moves applied by the search.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """
    Orthogonal unit vectors as (row delta, column delta).

    Declaration order (left, right, down, up) is the order in which
    neighbors are visited while grabbing cells.
    """
    LEFT = (0, -1)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    UP = (-1, 0)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    @property
    def is_horizontal(self) -> bool:
        return self.dr == 0


# Only horizontal moves are player actions; vertical motion comes from gravity.
HORIZONTAL_DIRECTIONS: Tuple[Direction, ...] = (Direction.LEFT, Direction.RIGHT)


@dataclass(frozen=True)
class Move:
    """
    A single player action: slide one group one cell sideways.

    Attributes:
        group: Group id in the level the move was applied to
        direction: Direction.LEFT or Direction.RIGHT
    """
    group: int
    direction: Direction

    def describe(self) -> str:
        """Human-readable form, e.g. 'group 2 right'."""
        return f"group {self.group} {self.direction.name.lower()}"

    def __str__(self) -> str:
        return self.describe()

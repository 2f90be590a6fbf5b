"""
Cell Module - Contents of a single grid position.
"""

from dataclasses import dataclass
from enum import IntEnum


class CellType(IntEnum):
    """Kind of content held by a cell. Values define the sort order."""
    OPEN = 0
    WALL = 1
    MOVABLE = 2


@dataclass(frozen=True, order=True)
class Cell:
    """
    Immutable grid cell.

    Attributes:
        type: OPEN, WALL or MOVABLE
        color: 0 for neutral (black) blocks, 1-9 for colors.
               Only meaningful for MOVABLE cells.
        group: 1+ for MOVABLE cells, 0 otherwise.
               Cells sharing a group move together as a rigid body.
    """
    type: CellType = CellType.OPEN
    color: int = 0
    group: int = 0

    @classmethod
    def movable(cls, color: int, group: int) -> 'Cell':
        """Create a movable block cell."""
        return cls(type=CellType.MOVABLE, color=color, group=group)

    @property
    def is_movable(self) -> bool:
        return self.type == CellType.MOVABLE

    @property
    def is_colored(self) -> bool:
        """True for movable cells that take part in color matching."""
        return self.type == CellType.MOVABLE and self.color > 0

    def char(self) -> str:
        """Character used for this cell in level text and renderings."""
        if self.type == CellType.OPEN:
            return ' '
        if self.type == CellType.WALL:
            return '#'
        return str(self.color)

    def with_group(self, group: int) -> 'Cell':
        return Cell(type=self.type, color=self.color, group=group)

    def joins(self, other: 'Cell') -> bool:
        """True if this cell and a neighbor render without a separator."""
        return self.type == other.type and self.group == other.group


OPEN = Cell()
WALL = Cell(type=CellType.WALL)

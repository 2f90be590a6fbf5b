"""
Level Module - Immutable puzzle state.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple

from .cell import Cell, OPEN, WALL
from .connectivity import is_solved, update_connections
from .grid import WorkGrid
from .move import HORIZONTAL_DIRECTIONS, Move

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Level:
    """
    Immutable snapshot of a puzzle grid.

    Uses tuple-of-tuples for hashability. Equality and ordering are
    structural: (width, height, groups) then cells in row-major order,
    which is what the search uses to deduplicate states.

    Attributes:
        width: Columns including the wall border
        height: Rows including the wall border
        groups: Number of live groups; ids are 1..groups
        grid: Row-major cells including the wall border
    """
    width: int
    height: int
    groups: int
    grid: Tuple[Tuple[Cell, ...], ...]

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> Optional['Level']:
        """
        Create a Level from the interior rows of a level file.

        '#' is a wall, '1'-'9' a colored block, '0' a neutral block and
        anything else open space. Every block starts in its own group;
        touching blocks of one color are merged right away. Gravity is
        not applied until the first move.

        Args:
            lines: Equal-length rows, without line terminators

        Returns:
            Level instance, or None if the block is empty or ragged
        """
        if not lines or not lines[0]:
            logger.warning("Level text is empty")
            return None
        interior_width = len(lines[0])
        for index, line in enumerate(lines):
            if len(line) != interior_width:
                logger.warning(
                    f"Row {index} has length {len(line)}, expected {interior_width}"
                )
                return None

        width = interior_width + 2
        height = len(lines) + 2
        groups = 0
        cells: List[List[Cell]] = []
        for r in range(height):
            row: List[Cell] = []
            for c in range(width):
                if r == 0 or r == height - 1 or c == 0 or c == width - 1:
                    row.append(WALL)
                    continue
                ch = lines[r - 1][c - 1]
                if ch == '#':
                    row.append(WALL)
                elif '0' <= ch <= '9':
                    groups += 1
                    row.append(Cell.movable(color=int(ch), group=groups))
                else:
                    row.append(OPEN)
            cells.append(row)

        work = WorkGrid(width, height, groups, cells)
        update_connections(work)
        return cls.from_work_grid(work)

    @classmethod
    def from_work_grid(cls, work: WorkGrid) -> 'Level':
        return cls(width=work.width, height=work.height,
                   groups=work.groups, grid=work.frozen_cells())

    def to_work_grid(self) -> WorkGrid:
        """Mutable copy of this level."""
        return WorkGrid(self.width, self.height, self.groups,
                        [list(row) for row in self.grid])

    def apply_move(self, move: Move) -> Optional['Level']:
        """
        Apply a move to create a new level. This level is unchanged.

        Args:
            move: Group and direction to move

        Returns:
            New Level after the move, gravity and merging,
            or None if the group is blocked
        """
        work = self.to_work_grid()
        if not work.move_group(move.group, move.direction):
            return None
        return Level.from_work_grid(work)

    def expand(self) -> List[Tuple[Move, 'Level']]:
        """
        All distinct levels one horizontal move away, with their moves.

        Moves are tried by increasing group id, left before right. When
        two moves lead to the same level only the first is kept.
        """
        result: List[Tuple[Move, Level]] = []
        seen: Set[Level] = set()
        for group in range(1, self.groups + 1):
            for direction in HORIZONTAL_DIRECTIONS:
                move = Move(group=group, direction=direction)
                next_level = self.apply_move(move)
                if next_level is None or next_level in seen:
                    continue
                seen.add(next_level)
                result.append((move, next_level))
        return result

    def successors(self) -> List['Level']:
        """Distinct levels one horizontal move away, in canonical order."""
        return sorted(level for _, level in self.expand())

    def is_solved(self) -> bool:
        """True if every color forms one connected region."""
        return is_solved(self.grid)

    def get_cell(self, row: int, col: int) -> Cell:
        """Cell at (row, col), border included."""
        return self.grid[row][col]

    def group_ids(self) -> Set[int]:
        """Group ids present on the grid."""
        return {cell.group for row in self.grid for cell in row if cell.is_movable}

    def interior_lines(self) -> List[str]:
        """Rows of the level in level-file notation, border excluded."""
        return [
            ''.join(cell.char() for cell in row[1:-1])
            for row in self.grid[1:-1]
        ]

    @property
    def rows(self) -> int:
        """Number of interior rows."""
        return self.height - 2

    @property
    def cols(self) -> int:
        """Number of interior columns."""
        return self.width - 2

    def __hash__(self):
        """Enable using Level as dict key or in sets."""
        return hash(self.grid)

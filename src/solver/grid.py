"""
Work Grid Module - Mutable grid used to simulate moves and gravity.

Level snapshots are immutable; every move is played out on a WorkGrid
copy which is frozen back into a Level afterwards.
"""

from typing import Iterator, List, Tuple

from .cell import Cell, CellType, OPEN
from .connectivity import update_connections
from .errors import InvariantViolation
from .move import Direction


class WorkGrid:
    """
    Mutable cell matrix with group bookkeeping.

    The outermost rows and columns are always walls, so neighbor lookups
    of interior cells never leave the matrix.

    Attributes:
        width: Number of columns, including the border
        height: Number of rows, including the border
        groups: Number of live groups; ids are 1..groups
        cells: Row-major list of rows
    """

    def __init__(self, width: int, height: int, groups: int, cells: List[List[Cell]]):
        self.width = width
        self.height = height
        self.groups = groups
        self.cells = cells

    def interior(self) -> Iterator[Tuple[int, int]]:
        """Yield (row, col) of every non-border cell in row-major order."""
        for r in range(1, self.height - 1):
            for c in range(1, self.width - 1):
                yield r, c

    def frozen_cells(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.cells)

    def move_group(self, group: int, direction: Direction) -> bool:
        """
        Slide a group one cell, pushing whatever it runs into.

        On success gravity and group merging are applied before returning.
        A failed move leaves the grid untouched.

        Args:
            group: Live group id (1..groups)
            direction: Direction to move in

        Returns:
            True if the group moved

        Raises:
            InvariantViolation: If the group id is not live
        """
        if not isinstance(direction, Direction):
            raise InvariantViolation(f"Not a direction: {direction!r}")
        if not 0 < group <= self.groups:
            raise InvariantViolation(f"Group {group} outside 1..{self.groups}")

        for r, c in self.interior():
            if self.cells[r][c].group == group:
                if not self.try_move(r, c, direction):
                    return False
                self.drop_down()
                update_connections(self)
                return True

        raise InvariantViolation(f"Group {group} not found")

    def try_move(self, r: int, c: int, direction: Direction) -> bool:
        """
        Move the block at (r, c) together with everything it drags along.

        Returns:
            True if the cells were translated, False if blocked
        """
        grabbed: List[Tuple[int, int, Cell]] = []
        moved = self._grab(r, c, direction, grabbed)
        dr, dc = (direction.dr, direction.dc) if moved else (0, 0)

        for r0, c0, cell in grabbed:
            r2, c2 = r0 + dr, c0 + dc
            if self.cells[r2][c2].type != CellType.OPEN:
                raise InvariantViolation(f"Target ({r2},{c2}) is occupied")
            self.cells[r2][c2] = cell
        return moved

    def _grab(self, r: int, c: int, direction: Direction,
              grabbed: List[Tuple[int, int, Cell]]) -> bool:
        """
        Lift the cells that must move with (r, c) off the grid.

        A lifted cell pulls in its own group in every direction and any
        movable cell directly ahead of it in the direction of motion.
        Lifted cells are recorded in `grabbed` and replaced by OPEN.

        Returns:
            False as soon as a lifted cell is directly in front of a wall
        """
        if not self.cells[r][c].is_movable:
            raise InvariantViolation(f"Cell ({r},{c}) is not movable")

        stack = [(r, c)]
        while stack:
            r, c = stack.pop()
            cell = self.cells[r][c]
            if not cell.is_movable:
                # already lifted through another neighbor
                continue
            grabbed.append((r, c, cell))
            self.cells[r][c] = OPEN

            for d in Direction:
                r2, c2 = r + d.dr, c + d.dc
                neighbor = self.cells[r2][c2]
                if d is direction:
                    if neighbor.type == CellType.WALL:
                        return False
                    if neighbor.is_movable:
                        stack.append((r2, c2))
                elif neighbor.is_movable and neighbor.group == cell.group:
                    stack.append((r2, c2))
        return True

    def drop_down(self) -> None:
        """
        Apply gravity with one top-to-bottom sweep.

        A block that falls lands on a row the sweep has not reached yet,
        so it is visited again and keeps falling until it rests.
        """
        for r, c in self.interior():
            if self.cells[r][c].is_movable:
                self.try_move(r, c, Direction.DOWN)

"""
Connectivity Module - Group merging, id compaction and the solved check.

Group ids are kept as a dense range 1..G after every change so that two
physically identical grids compare equal cell by cell.
"""

from typing import TYPE_CHECKING, List, Sequence, Set

from .cell import Cell
from .errors import InvariantViolation

if TYPE_CHECKING:
    from .grid import WorkGrid


NEIGHBOR_OFFSETS = ((0, -1), (0, 1), (1, 0), (-1, 0))


def update_connections(grid: 'WorkGrid') -> None:
    """
    Merge every pair of touching same-colored groups.

    Scans the grid once in row-major order, comparing each colored block
    with its right and lower neighbor. Neutral blocks never merge.
    Running it again on the result changes nothing.
    """
    for r, c in grid.interior():
        for dr, dc in ((0, 1), (1, 0)):
            # re-read: a merge may have renumbered this cell
            cell = grid.cells[r][c]
            if not cell.is_colored:
                break
            other = grid.cells[r + dr][c + dc]
            if other.is_movable and other.group != cell.group and other.color == cell.color:
                if other.group > cell.group:
                    merge_groups(grid, r + dr, c + dc, cell.group)
                else:
                    merge_groups(grid, r, c, other.group)


def merge_groups(grid: 'WorkGrid', r: int, c: int, target: int) -> None:
    """Relabel the group at (r, c) to `target` and drop its old id."""
    source = grid.cells[r][c].group
    regroup(grid, r, c, source, target)
    remove_unused_group_number(grid, source)


def regroup(grid: 'WorkGrid', r: int, c: int, source: int, target: int) -> None:
    """Flood-fill cells carrying group `source`, starting at (r, c)."""
    stack = [(r, c)]
    while stack:
        r, c = stack.pop()
        cell = grid.cells[r][c]
        if cell.group != source:
            continue
        grid.cells[r][c] = cell.with_group(target)
        for dr, dc in NEIGHBOR_OFFSETS:
            stack.append((r + dr, c + dc))


def remove_unused_group_number(grid: 'WorkGrid', group: int) -> None:
    """Close the gap left by a merged-away id by shifting higher ids down."""
    if not 0 < group <= grid.groups:
        raise InvariantViolation(f"Group {group} outside 1..{grid.groups}")

    for r, c in grid.interior():
        cell = grid.cells[r][c]
        if cell.group == group:
            raise InvariantViolation(f"Group {group} still in use at ({r},{c})")
        if cell.group > group:
            grid.cells[r][c] = cell.with_group(cell.group - 1)
    grid.groups -= 1


def is_solved(cells: Sequence[Sequence[Cell]]) -> bool:
    """
    Check whether every color forms a single connected region.

    Regions are found by flood-filling through 4-adjacent blocks of the
    same color. Group ids are not consulted: two regions of one color can
    share a group through a neutral block without touching each other.

    Args:
        cells: Row-major cell matrix including the wall border

    Returns:
        True if no color occurs in two separate regions
    """
    height = len(cells)
    width = len(cells[0]) if height else 0
    visited: List[List[bool]] = [[False] * width for _ in range(height)]
    colors: Set[int] = set()

    for r in range(1, height - 1):
        for c in range(1, width - 1):
            cell = cells[r][c]
            if visited[r][c] or not cell.is_colored:
                continue
            if cell.color in colors:
                # second region of one color
                return False
            colors.add(cell.color)
            _mark_color_region(cells, r, c, visited)
    return True


def _mark_color_region(cells: Sequence[Sequence[Cell]], r: int, c: int,
                       visited: List[List[bool]]) -> None:
    color = cells[r][c].color
    visited[r][c] = True
    stack = [(r, c)]
    while stack:
        r, c = stack.pop()
        for dr, dc in NEIGHBOR_OFFSETS:
            r2, c2 = r + dr, c + dc
            neighbor = cells[r2][c2]
            if not visited[r2][c2] and neighbor.is_movable and neighbor.color == color:
                visited[r2][c2] = True
                stack.append((r2, c2))

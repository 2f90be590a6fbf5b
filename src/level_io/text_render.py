"""
Text Rendering

Draws a level as a box of characters. Cells of the same kind and group
are drawn without a separator between them, so fused groups show up as
single shapes:

    +---------+
    |# # # # #|
    | +-+-+-+ |
    |#| |1 1|#|
    | +-+-+-+ |
    |# # # # #|
    +---------+
"""

from typing import List, Sequence

from src.solver import Level

JOINED = "·"


def render_level(level: Level) -> str:
    """
    Render a level, border walls included.

    Args:
        level: Level to draw

    Returns:
        Multi-line string, every line terminated by a newline
    """
    grid = level.grid
    width = level.width
    height = level.height
    edge = "+-" + "--" * (width - 1) + "+\n"

    out: List[str] = [edge]
    for r in range(height):
        row = ["|"]
        for c in range(width):
            cell = grid[r][c]
            row.append(cell.char())
            if c + 1 < width:
                row.append(" " if cell.joins(grid[r][c + 1]) else "|")
        row.append("|\n")
        out.append("".join(row))

        if r + 1 < height:
            row = ["|"]
            for c in range(width):
                cell = grid[r][c]
                below = cell.joins(grid[r + 1][c])
                row.append(" " if below else "-")
                if c + 1 < width:
                    joined = (below
                              and cell.joins(grid[r][c + 1])
                              and cell.joins(grid[r + 1][c + 1]))
                    row.append(JOINED if joined else "+")
            row.append("|\n")
            out.append("".join(row))
    out.append(edge)
    return "".join(out)


def format_transcript(steps: Sequence[Level]) -> str:
    """
    Format a solution the way the golden transcripts store it.

    Args:
        steps: Levels from start to solved, or empty if unsolvable

    Returns:
        Transcript text
    """
    if not steps:
        return "No solution found!\n"

    parts = [f"Found a solution in {len(steps) - 1} steps.\n"]
    for i, level in enumerate(steps):
        parts.append(f"\nStep {i}:\n")
        parts.append(render_level(level))
    return "".join(parts)

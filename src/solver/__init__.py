"""
Solver Package - State model and search for the falling-block puzzle.

A level is a walled grid of open cells and colored blocks. Blocks fall
under gravity, touching blocks of one color fuse into rigid groups, and
the player slides one group left or right per move. The level is solved
when every color forms a single connected region.

Public API:
    - Level: Immutable puzzle state
    - Cell, CellType: Grid contents
    - Direction, Move: Group moves
    - WorkGrid: Mutable grid used to simulate a move
    - Solution: Result of strategy computation
    - SolutionMetrics: Performance statistics
    - SolutionContext: Shared context for strategies
    - SolverStrategy: Abstract base for strategies
    - InvariantViolation: Internal consistency error
    - solve(): Shortest path of levels, or [] if unsolvable
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from src.solver import Level, SolutionContext, create_strategy

    level = Level.from_lines(["1 1", "2#2"])
    context = SolutionContext(board=level, max_states=100_000)

    strategy = create_strategy("bfs")
    solution = strategy.solve(context)

    for move in solution.moves:
        print(move.describe())
"""

# Core data structures
from .cell import Cell, CellType
from .move import Direction, Move
from .errors import InvariantViolation
from .grid import WorkGrid
from .level import Level
from .solution import Solution, SolutionMetrics
from .context import SolutionContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies
from .strategies import solve

__all__ = [
    # Data structures
    "Cell",
    "CellType",
    "Direction",
    "Move",
    "InvariantViolation",
    "WorkGrid",
    "Level",
    "Solution",
    "SolutionMetrics",
    "SolutionContext",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "solve",
]

"""
Solution Module - Result of a strategy computation.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .level import Level
from .move import Move


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of distinct levels discovered
        duplicates_skipped: Successors dropped because they were already known
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    duplicates_skipped: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    A search that finds no solution is not an error: it returns an empty
    solution with is_complete False. was_cancelled marks a search that was
    stopped by a time or state limit before it could decide.

    Attributes:
        board_states: Levels from the initial one to the solved one, inclusive
        moves: Move leading from each level to the next
        is_complete: True if board_states ends in a solved level
        was_cancelled: True if stopped before completion
        metrics: Performance statistics
    """
    board_states: List[Level] = field(default_factory=list)
    moves: List[Move] = field(default_factory=list)
    is_complete: bool = False
    was_cancelled: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def has_moves(self) -> bool:
        """Check if solution has any moves."""
        return len(self.moves) > 0

    @property
    def final_board(self) -> Optional[Level]:
        """Last level of the path, or None if there is no path."""
        return self.board_states[-1] if self.board_states else None


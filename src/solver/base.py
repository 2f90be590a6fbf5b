"""
Base Strategy Module - Abstract base class for solving strategies.
"""

from abc import ABC, abstractmethod

from .context import SolutionContext
from .solution import Solution


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for --help output
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Compute a solution for the level in the context.

        Must periodically check context.is_cancelled() and return
        a cancelled solution if True.

        Args:
            context: Solution context with level, limits, progress

        Returns:
            Solution with levels, moves and metrics
        """
        pass

    def _check_cancelled(self, context: SolutionContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Solution context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()

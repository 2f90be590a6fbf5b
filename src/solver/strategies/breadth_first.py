"""
Breadth-First Strategy - Exhaustive search for the fewest moves.

Explores levels in order of distance from the start. Every discovered
level is kept until the search returns, both to skip duplicates and to
walk back from the solved level to the start.
"""

import time
import logging
from typing import Dict, List, Optional

from ..base import SolverStrategy
from ..context import SolutionContext
from ..factory import register_strategy
from ..level import Level
from ..move import Move
from ..solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)

# Expansions between progress reports
PROGRESS_INTERVAL = 1000


@register_strategy
class BreadthFirstStrategy(SolverStrategy):
    """
    Breadth-first search over levels reachable by horizontal moves.

    Algorithm:
        1. Return the start level alone if it is already solved
        2. Expand levels in FIFO order, each successor remembering the
           index of the level it came from and the move that produced it
        3. Stop at the first solved successor; moves are tried by
           increasing group id, left before right
        4. Rebuild the path by following predecessor indices back to 0

    No pruning is applied beyond skipping known levels, so the number of
    stored levels can grow exponentially with the level size. Use
    context.max_states or context.timeout_sec to bound it.
    """
    name = "bfs"
    description = "Breadth-first search - fewest moves, explores every state"

    def solve(self, context: SolutionContext) -> Solution:
        """
        Search for the shortest sequence of moves solving context.board.

        Args:
            context: Solution context with level, limits and progress

        Returns:
            Solution; empty and not complete when no solution exists
        """
        start_time = time.perf_counter()
        initial = context.board

        if initial.is_solved():
            logger.info("Initial level is already solved")
            return self._build_solution(
                [initial], [], 1, 0, start_time, is_complete=True
            )

        # Discovery index of every known level, and per index its
        # predecessor and the move that reached it.
        level_index: Dict[Level, int] = {initial: 0}
        levels: List[Level] = [initial]
        previous_index: List[int] = [-1]
        incoming_move: List[Optional[Move]] = [None]
        duplicates = 0

        i = 0
        while i < len(levels):
            if self._check_cancelled(context):
                return self._aborted(len(levels), duplicates, start_time)

            if i and i % PROGRESS_INTERVAL == 0:
                context.report_progress(
                    len(levels), f"{i} expanded, {len(levels) - i} queued"
                )

            for move, next_level in levels[i].expand():
                if next_level.is_solved():
                    logger.info(f"Solution found (expanded {len(levels)} states)")
                    path, moves = self._reconstruct_path(
                        i, levels, previous_index, incoming_move
                    )
                    path.append(next_level)
                    moves.append(move)
                    return self._build_solution(
                        path, moves, len(levels), duplicates, start_time,
                        is_complete=True
                    )
                if next_level in level_index:
                    duplicates += 1
                    continue
                # Storing one more level would exceed max_states
                if context.state_limit_reached(len(levels)):
                    return self._aborted(len(levels), duplicates, start_time)
                level_index[next_level] = len(levels)
                levels.append(next_level)
                previous_index.append(i)
                incoming_move.append(move)
            i += 1

        logger.info(f"No solution found (expanded {len(levels)} states)")
        return self._build_solution(
            [], [], len(levels), duplicates, start_time, is_complete=False
        )

    @staticmethod
    def _reconstruct_path(index: int, levels: List[Level],
                          previous_index: List[int],
                          incoming_move: List[Optional[Move]]):
        """Walk predecessor links from `index` back to the start level."""
        path: List[Level] = []
        moves: List[Move] = []
        j = index
        while j >= 0:
            path.append(levels[j])
            move = incoming_move[j]
            if move is not None:
                moves.append(move)
            j = previous_index[j]
        path.reverse()
        moves.reverse()
        return path, moves

    def _aborted(self, states: int, duplicates: int, start_time: float) -> Solution:
        logger.warning(f"Search aborted (stored {states} states)")
        return self._build_solution(
            [], [], states, duplicates, start_time,
            is_complete=False, was_cancelled=True
        )

    def _build_solution(
        self,
        board_states: List[Level],
        moves: List[Move],
        states_explored: int,
        duplicates_skipped: int,
        start_time: float,
        is_complete: bool,
        was_cancelled: bool = False
    ) -> Solution:
        """Build Solution object from computation results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return Solution(
            board_states=board_states,
            moves=moves,
            is_complete=is_complete,
            was_cancelled=was_cancelled,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=states_explored,
                duplicates_skipped=duplicates_skipped,
                strategy_name=self.name
            )
        )


def solve(level: Level, max_states: Optional[int] = None,
          timeout_sec: Optional[float] = None) -> List[Level]:
    """
    Shortest solution path for a level.

    Args:
        level: Starting level
        max_states: Optional bound on stored states
        timeout_sec: Optional bound on run time

    Returns:
        Levels from start to solved inclusive, or an empty list if the
        level has no solution or a bound was hit
    """
    context = SolutionContext(board=level, max_states=max_states,
                              timeout_sec=timeout_sec)
    return BreadthFirstStrategy().solve(context).board_states

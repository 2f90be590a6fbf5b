"""
Solution Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .level import Level


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing the starting level,
    optional search bounds, cancellation and progress reporting.

    Search is unbounded unless the caller sets a limit.

    Attributes:
        board: Level to solve
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds, None for no limit
        max_states: Maximum number of distinct states to keep, None for no limit
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    board: Level
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    max_states: Optional[int] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[int, str], None]] = None

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and self.elapsed_time() > self.timeout_sec:
            return True
        return False

    def state_limit_reached(self, states: int) -> bool:
        """True if `states` distinct states meet or exceed max_states."""
        return self.max_states is not None and states >= self.max_states

    def report_progress(self, states: int, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            states: Number of states discovered so far
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(states, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.time() - self.start_time

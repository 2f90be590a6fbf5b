"""
Block Drop Solver - Entry Point

Finds the shortest sequence of sideways moves that joins every color of
a falling-block level into one region, and prints each step.

Example:
    python main.py levels/one_step.txt
    python main.py levels/big.txt --max-states 200000 --render-dir render
"""

import sys
import logging
import argparse
from typing import List, Optional

from src.level_io import LevelLoadError, format_transcript, load_level, save_solution_images
from src.settings import load_settings, save_settings
from src.solver import SolutionContext, create_strategy, get_strategy_info


EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_USAGE = 2
EXIT_ABORTED = 3

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Send log output to stderr, keeping stdout for the transcript."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler()]  # stderr
    )


def use_utf8_stdout() -> None:
    """Switch stdout to UTF-8; the transcript uses non-ASCII joint markers."""
    encoding = (getattr(sys.stdout, "encoding", None) or "").lower().replace("-", "")
    if encoding != "utf8" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    strategies = ", ".join(
        f"{info['name']} ({info['description']})" for info in get_strategy_info()
    )
    parser = argparse.ArgumentParser(
        description="Block Drop Solver - shortest solution for a falling-block level"
    )
    parser.add_argument("level", help="Level file to solve")
    parser.add_argument(
        "--strategy", "-s",
        help=f"Search strategy. Available: {strategies}"
    )
    parser.add_argument(
        "--max-states", type=positive_int,
        help="Give up before storing more than this many distinct states (default: unlimited)"
    )
    parser.add_argument(
        "--timeout", type=float,
        help="Give up after this many seconds (default: unlimited)"
    )
    parser.add_argument(
        "--render-dir",
        help="Also save every step as a PNG image in this directory"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Store the effective options in config.json as new defaults"
    )
    return parser.parse_args(argv)


def _log_progress(states: int, message: str) -> None:
    logger.debug(f"{states} states: {message}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Solve one level file and print the transcript.

    Returns:
        Exit code
    """
    args = parse_args(argv)
    use_utf8_stdout()
    settings = load_settings()

    # CLI flags override saved settings
    if args.debug:
        settings["debug_enabled"] = True
    if args.strategy is not None:
        settings["strategy_name"] = args.strategy
    if args.max_states is not None:
        settings["max_states"] = args.max_states
    if args.timeout is not None:
        settings["timeout_sec"] = args.timeout
    if args.render_dir is not None:
        settings["render_dir"] = args.render_dir

    configure_logging(settings["debug_enabled"])

    try:
        strategy = create_strategy(settings["strategy_name"])
    except ValueError as e:
        logger.error(str(e))
        return EXIT_USAGE

    # Only options that passed validation become new defaults
    if args.save_settings:
        save_settings(settings)

    try:
        level = load_level(args.level)
    except LevelLoadError as e:
        print(e, file=sys.stderr)
        return EXIT_LOAD_ERROR

    context = SolutionContext(
        board=level,
        timeout_sec=settings["timeout_sec"],
        max_states=settings["max_states"],
        progress_callback=_log_progress,
    )
    solution = strategy.solve(context)
    metrics = solution.metrics
    logger.debug(
        f"{metrics.strategy_name}: {metrics.states_explored} states, "
        f"{metrics.duplicates_skipped} duplicates, {metrics.computation_time_ms:.1f}ms"
    )

    if solution.was_cancelled:
        print(f"Search aborted after {metrics.states_explored} states.")
        return EXIT_ABORTED

    sys.stdout.write(format_transcript(solution.board_states))
    sys.stdout.flush()

    for i, move in enumerate(solution.moves):
        logger.debug(f"Move {i + 1}: {move.describe()}")

    if settings["render_dir"] and solution.board_states:
        save_solution_images(solution.board_states, settings["render_dir"])

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

"""
Golden transcript check.

Runs every solver on every level that has a stored solution and compares
the solver's stdout with the stored transcript. Exits non-zero on the
first missing solver or on any mismatch.

Usage:
    python tools/verify_solutions.py                # checks main.py
    python tools/verify_solutions.py ./solve.opt    # checks other binaries
"""

import argparse
import difflib
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).parent.parent


def default_solver() -> List[str]:
    """Command running this project's solver with the current interpreter."""
    return [sys.executable, str(PROJECT_ROOT / "main.py")]


def verify(solver: List[str], level: Path, solution: Path) -> bool:
    """
    Run one solver on one level and diff its output with the golden file.

    Returns:
        True if the output matches exactly
    """
    env = dict(os.environ, PYTHONIOENCODING="utf-8")
    result = subprocess.run(
        solver + [str(level)],
        capture_output=True,
        env=env,
        cwd=PROJECT_ROOT,
    )
    actual = result.stdout.decode("utf-8").splitlines(keepends=True)
    expected = solution.read_text(encoding="utf-8").splitlines(keepends=True)
    if actual == expected:
        return True

    sys.stdout.writelines(difflib.unified_diff(
        expected, actual, fromfile=str(solution), tofile=" ".join(solver)
    ))
    return False


def main() -> int:
    parser = argparse.ArgumentParser(description="Compare solver output with golden transcripts")
    parser.add_argument("solvers", nargs="*", help="Solver executables (default: main.py)")
    parser.add_argument("--levels", type=Path, default=PROJECT_ROOT / "levels")
    parser.add_argument("--solutions", type=Path, default=PROJECT_ROOT / "solutions")
    args = parser.parse_args()

    solvers: List[List[str]] = []
    for name in args.solvers:
        path = Path(name)
        if not (path.is_file() and os.access(path, os.X_OK)):
            print(f"Missing executable: '{name}'")
            return 1
        solvers.append([str(path.resolve())])
    if not solvers:
        solvers.append(default_solver())

    failed = 0
    for solution in sorted(args.solutions.glob("*.txt")):
        level = args.levels / solution.name
        for solver in solvers:
            print(f"Verifying {solution} with {' '.join(solver)}...")
            if not verify(solver, level, solution):
                failed += 1

    if failed:
        print(f"{failed} transcript(s) differ")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

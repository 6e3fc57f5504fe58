#!/usr/bin/env python3
"""Solve wheel boards from the command line.

Reads one board per line (or a single --board), then prints the number of
search states, the start tap and the gesture instructions.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from wheel_solver.config import get_settings
from wheel_solver.core.encoder import plan_instructions
from wheel_solver.core.solver import WheelSolver
from wheel_solver.models.board import parse_board
from wheel_solver.utils.helpers import normalize_board_text, validate_board_text

logger = logging.getLogger(__name__)

PROMPT = (
    'Pick one region to be "0"; the rest are numbered clockwise from there.\n'
    "Enter each region's latent countdown clockwise from 0, or - for dead regions."
)


def solve_line(text: str, solver: WheelSolver, run_cap: int) -> List[str]:
    """Solve one board line and return the lines to print."""
    board = parse_board(text)
    result = solver.solve_board(board)

    lines = [f"Number of states: {result.states_visited}", ""]
    if result.start_location is None:
        lines.append("Board is already clear")
    else:
        lines.extend(plan_instructions(result.actions, result.start_location, len(board), run_cap))
    lines.append("")
    return lines


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Find the best plan to clear a wheel board")
    parser.add_argument("--board", "-b", type=str, default=None,
                        help="Board to solve (default: read boards from stdin)")
    parser.add_argument("--threshold", "-t", type=int, default=settings.threshold,
                        help=f"Strength at which active tiles die (default: {settings.threshold})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log search statistics")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )

    solver = WheelSolver(threshold=args.threshold)

    if args.board is not None:
        lines = [args.board]
    else:
        print(PROMPT)
        lines = sys.stdin

    for raw in lines:
        text = normalize_board_text(raw)
        is_valid, error = validate_board_text(text)
        if not is_valid:
            logger.warning("Skipping board: %s", error)
            continue
        print("\n".join(solve_line(text, solver, settings.gesture_run_cap)))


if __name__ == "__main__":
    main()

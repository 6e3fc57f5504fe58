#!/usr/bin/env python3
"""Profile the exhaustive search to identify bottlenecks."""

import cProfile
import pstats
import sys
from io import StringIO
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from wheel_solver.core.solver import get_solver
from wheel_solver.models.board import parse_board


def run_search(text: str = "012345"):
    """Run one full solve for profiling."""
    solver = get_solver()
    result = solver.solve_board(parse_board(text))
    print(f"Reward: {result.reward}, actions: {len(result.actions)}, states: {result.states_visited}")
    return result


if __name__ == "__main__":
    profiler = cProfile.Profile()
    profiler.enable()

    run_search(sys.argv[1] if len(sys.argv) > 1 else "012345")

    profiler.disable()

    # Print top 30 functions by cumulative time
    s = StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats('cumulative')
    ps.print_stats(30)
    print(s.getvalue())

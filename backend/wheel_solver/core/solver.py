"""Exhaustive search for the best clearing plan of a wheel board.

The search explores every action sequence depth-first:
- A cleared board (all tiles dead) is a result
- States whose (board, cursor, reward) key was already visited are pruned
- Before the first decision, every region is tried as the start location
- Afterwards each of the four actions is tried, never collecting twice in a row

Among results, higher reward wins and equal reward prefers fewer actions.
Equivalent plans keep the one found first.
"""
import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Set

from ..config import get_settings
from ..errors import ErrorCode, SolverError
from ..models.board import Board, DEFAULT_THRESHOLD, format_board
from ..models.game import ACTION_ORDER, Action, GameState, StateKey, new_game


logger = logging.getLogger(__name__)


def is_better(candidate: GameState, best: Optional[GameState]) -> bool:
    """Check whether a cleared state should replace the current best."""
    if best is None:
        return True
    if candidate.reward != best.reward:
        return candidate.reward > best.reward
    return candidate.action_count < best.action_count


@dataclass
class SolveResult:
    """Result of solving one board."""
    initial_board: Board
    best: GameState
    states_visited: int
    elapsed_ms: int = 0

    @property
    def start_location(self) -> Optional[int]:
        return self.best.start_location

    @property
    def reward(self) -> int:
        return self.best.reward

    @property
    def actions(self) -> List[Action]:
        return self.best.actions


class WheelSolver:
    """Finds the highest scoring way to clear a wheel board."""

    def __init__(self, threshold: int = DEFAULT_THRESHOLD):
        self.threshold = threshold

    def solve(
        self,
        state: GameState,
        visited: Optional[Set[StateKey]] = None,
        memoize: bool = True,
    ) -> Optional[GameState]:
        """
        Search every continuation of a state for the best cleared state.

        The work stack replays the recursive pre-order exactly: children are
        pushed in reverse so they are entered in branching order, and keys
        are recorded when a state is entered.

        Args:
            state: State to search from. It is never mutated.
            visited: Keys of states already entered. Updated in place.
            memoize: Prune states whose key was already entered.

        Returns:
            Best cleared state, or None if no continuation clears the board.
        """
        if visited is None:
            visited = set()

        best: Optional[GameState] = None
        stack: List[GameState] = [state]

        while stack:
            current = stack.pop()

            if current.is_cleared:
                if is_better(current, best):
                    best = current
                continue

            if memoize:
                key = current.key()
                if key in visited:
                    continue
                visited.add(key)

            stack.extend(reversed(self._expand(current)))

        return best

    def _expand(self, state: GameState) -> List[GameState]:
        """Build the child states of a state in branching order."""
        children = []

        if state.cursor is None:
            for location in range(state.region_count):
                child = state.clone()
                child.begin(location)
                children.append(child)
            return children

        for action in ACTION_ORDER:
            # A second collect in a row only hits a dead tile
            if action == Action.COLLECT and state.last_action == Action.COLLECT:
                continue
            child = state.clone()
            child.apply(action)
            children.append(child)

        return children

    def solve_board(self, board: Board, threshold: Optional[int] = None) -> SolveResult:
        """
        Solve a whole session for a parsed board.

        Args:
            board: Initial board.
            threshold: Strength at which active tiles die, defaults to the solver's.

        Returns:
            SolveResult with the best plan and search statistics.

        Raises:
            SolverError: If no sequence clears the board.
        """
        threshold = self.threshold if threshold is None else threshold
        state = new_game(board, threshold)
        visited: Set[StateKey] = set()

        logger.debug("Solving board [%s] with threshold %d", format_board(board), threshold)
        started = time.perf_counter()
        best = self.solve(state, visited)
        elapsed_ms = int((time.perf_counter() - started) * 1000)

        if best is None:
            raise SolverError(
                ErrorCode.NO_TERMINAL_STATE,
                "Search finished without clearing the board",
                {"board": format_board(board), "states_visited": len(visited)},
            )

        logger.info(
            "Solved %d-region board: reward=%d actions=%d states=%d (%dms)",
            len(board), best.reward, best.action_count, len(visited), elapsed_ms,
        )
        return SolveResult(
            initial_board=tuple(board),
            best=best,
            states_visited=len(visited),
            elapsed_ms=elapsed_ms,
        )


# Singleton instance
_solver = None


def get_solver() -> WheelSolver:
    """Get or create solver singleton instance."""
    global _solver
    if _solver is None:
        _solver = WheelSolver(threshold=get_settings().threshold)
    return _solver

"""Game state and player actions for the rotary wheel puzzle."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .board import Board, DEAD, DEFAULT_THRESHOLD, TileKind, advance_tick, is_cleared
from ..errors import ErrorCode, SolverError


class Action(str, Enum):
    """Player action enumeration."""
    ADVANCE = "advance"
    COUNTER_CLOCKWISE = "counter_clockwise"
    CLOCKWISE = "clockwise"
    COLLECT = "collect"

    @property
    def is_rotation(self) -> bool:
        return self in (Action.COUNTER_CLOCKWISE, Action.CLOCKWISE)

    @property
    def step(self) -> int:
        """Cursor offset applied by this action."""
        if self == Action.COUNTER_CLOCKWISE:
            return -1
        if self == Action.CLOCKWISE:
            return 1
        return 0


# Branching order used by the search; ties keep the earliest plan in this order
ACTION_ORDER: Tuple[Action, ...] = (
    Action.ADVANCE,
    Action.COUNTER_CLOCKWISE,
    Action.CLOCKWISE,
    Action.COLLECT,
)

# (board, cursor, reward): states with equal keys share the same futures
StateKey = Tuple[Board, Optional[int], int]


@dataclass
class GameState:
    """Represents one point of a solving session."""
    board: Board
    cursor: Optional[int] = None
    start_location: Optional[int] = None
    reward: int = 0
    threshold: int = DEFAULT_THRESHOLD
    actions: List[Action] = field(default_factory=list)
    cursor_history: List[Optional[int]] = field(default_factory=list)

    @property
    def region_count(self) -> int:
        return len(self.board)

    @property
    def action_count(self) -> int:
        return len(self.actions)

    @property
    def is_cleared(self) -> bool:
        return is_cleared(self.board)

    @property
    def last_action(self) -> Optional[Action]:
        return self.actions[-1] if self.actions else None

    def key(self) -> StateKey:
        """Canonical key used to deduplicate search states."""
        return (self.board, self.cursor, self.reward)

    def clone(self) -> "GameState":
        """Copy the state; the board is immutable, histories are copied."""
        return GameState(
            board=self.board,
            cursor=self.cursor,
            start_location=self.start_location,
            reward=self.reward,
            threshold=self.threshold,
            actions=list(self.actions),
            cursor_history=list(self.cursor_history),
        )

    def tick(self) -> None:
        self.board = advance_tick(self.board, self.threshold)

    def begin(self, location: int) -> None:
        """Pick the starting region and run the opening tick.

        The opening tick is not a player action and is not recorded.
        """
        if not 0 <= location < self.region_count:
            raise SolverError(
                ErrorCode.INVALID_ACTION,
                f"Start location {location} outside board of {self.region_count} regions",
            )
        self.cursor = location
        self.start_location = location
        self.tick()

    def apply(self, action: Action) -> None:
        """Apply a player action and record it."""
        if self.cursor is None:
            raise SolverError(
                ErrorCode.CURSOR_UNSET,
                f"{action.value} attempted before a start location was chosen",
            )

        if action == Action.COLLECT:
            tile = self.board[self.cursor]
            if tile.kind == TileKind.ACTIVE:
                self.reward += tile.value ** 2
            self.board = self.board[:self.cursor] + (DEAD,) + self.board[self.cursor + 1:]
        else:
            if action.is_rotation:
                self.cursor = (self.cursor + action.step) % self.region_count
            self.tick()

        self.actions.append(action)
        self.cursor_history.append(self.cursor)


def new_game(board: Board, threshold: int = DEFAULT_THRESHOLD) -> GameState:
    """Create the initial state of a session."""
    return GameState(board=tuple(board), threshold=threshold)


def replay(
    board: Board,
    start_location: int,
    actions: Iterable[Action],
    threshold: int = DEFAULT_THRESHOLD,
) -> GameState:
    """Rebuild the state reached by playing actions from a start location."""
    state = new_game(board, threshold)
    state.begin(start_location)
    for action in actions:
        state.apply(action)
    return state


def parse_actions(names: Iterable[str]) -> List[Action]:
    """Convert action names to actions, rejecting unknown names."""
    actions = []
    for name in names:
        try:
            actions.append(Action(name))
        except ValueError:
            raise SolverError(
                ErrorCode.INVALID_ACTION,
                f"Unknown action '{name}'",
                {"allowed": [a.value for a in Action]},
            )
    return actions

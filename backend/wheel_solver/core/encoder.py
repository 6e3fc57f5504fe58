"""Compress an action history into the physical gestures the game accepts.

Gesture rules:
- A run of advances is one "tap the active region n times"
- A run of same-direction rotations (at most GESTURE_RUN_CAP per gesture)
  taps the region it ends on, or swipes it when a collect follows
- Any other collect swipes the active region
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from ..errors import ErrorCode, SolverError
from ..models.game import Action


GESTURE_RUN_CAP = 3


class GestureType(str, Enum):
    """Gesture type enumeration."""
    TAP_ACTIVE = "tap_active"      # advance the wheel n times
    TAP_REGION = "tap_region"      # rotate to a region
    SWIPE_REGION = "swipe_region"  # rotate to a region and collect it
    SWIPE_ACTIVE = "swipe_active"  # collect the current region


@dataclass
class Gesture:
    """A single physical input."""
    gesture_type: GestureType
    count: int = 1
    position: Optional[int] = None
    step: int = 0  # -1 counter-clockwise, 1 clockwise, 0 no rotation

    def to_actions(self) -> List[Action]:
        """Expand the gesture back into the actions it stands for."""
        if self.gesture_type == GestureType.TAP_ACTIVE:
            return [Action.ADVANCE] * self.count
        if self.gesture_type == GestureType.SWIPE_ACTIVE:
            return [Action.COLLECT]
        rotation = Action.CLOCKWISE if self.step > 0 else Action.COUNTER_CLOCKWISE
        actions = [rotation] * self.count
        if self.gesture_type == GestureType.SWIPE_REGION:
            actions.append(Action.COLLECT)
        return actions

    def to_instruction(self) -> str:
        if self.gesture_type == GestureType.TAP_ACTIVE:
            return f"tap the active region {self.count} times"
        if self.gesture_type == GestureType.TAP_REGION:
            return f"tap on {self.position}"
        if self.gesture_type == GestureType.SWIPE_REGION:
            return f"swipe on {self.position}"
        return "swipe on active region"

    def to_dict(self) -> dict:
        return {
            "type": self.gesture_type.value,
            "count": self.count,
            "position": self.position,
            "step": self.step,
        }


def encode_gestures(
    actions: Sequence[Action],
    start_location: int,
    region_count: int,
    run_cap: int = GESTURE_RUN_CAP,
) -> List[Gesture]:
    """
    Group an action history into gestures.

    Args:
        actions: Actions in play order.
        start_location: Region the session started on.
        region_count: Number of regions on the wheel.
        run_cap: Most rotation steps one gesture can cover.

    Returns:
        Gestures in play order.
    """
    if region_count < 1:
        raise SolverError(ErrorCode.INVALID_BOARD, "Cannot encode gestures for an empty board")
    if run_cap < 1:
        raise SolverError(ErrorCode.INVALID_ACTION, f"Gesture run cap must be positive, got {run_cap}")

    gestures: List[Gesture] = []
    location = start_location
    i = 0

    while i < len(actions):
        action = actions[i]

        if action == Action.ADVANCE:
            run = 1
            while i + run < len(actions) and actions[i + run] == Action.ADVANCE:
                run += 1
            gestures.append(Gesture(GestureType.TAP_ACTIVE, count=run))
            i += run

        elif action.is_rotation:
            run = 1
            while (run < run_cap and i + run < len(actions)
                   and actions[i + run] == action):
                run += 1
            location = (location + action.step * run) % region_count
            i += run

            if i < len(actions) and actions[i] == Action.COLLECT:
                gesture_type = GestureType.SWIPE_REGION
                i += 1
            else:
                gesture_type = GestureType.TAP_REGION
            gestures.append(Gesture(gesture_type, count=run, position=location, step=action.step))

        else:
            gestures.append(Gesture(GestureType.SWIPE_ACTIVE))
            i += 1

    return gestures


def encode(
    actions: Sequence[Action],
    start_location: int,
    region_count: int,
    run_cap: int = GESTURE_RUN_CAP,
) -> List[str]:
    """Encode an action history as printable instructions."""
    return [g.to_instruction() for g in encode_gestures(actions, start_location, region_count, run_cap)]


def decode_gestures(gestures: Iterable[Gesture]) -> List[Action]:
    """Expand gestures back into the action history they encode."""
    actions: List[Action] = []
    for gesture in gestures:
        actions.extend(gesture.to_actions())
    return actions


def simulate_gestures(
    gestures: Iterable[Gesture],
    start_location: int,
    region_count: int,
    run_cap: int = GESTURE_RUN_CAP,
) -> int:
    """Follow gestures from the start location and return the final cursor.

    Region gestures rotate the wheel by their step count; gestures on the
    active region leave the cursor in place.
    """
    location = start_location
    for gesture in gestures:
        if gesture.count > run_cap and gesture.step != 0:
            raise SolverError(
                ErrorCode.INVALID_ACTION,
                f"Rotation gesture covers {gesture.count} steps, more than {run_cap}",
            )
        location = (location + gesture.step * gesture.count) % region_count
    return location


def plan_instructions(
    actions: Sequence[Action],
    start_location: Optional[int],
    region_count: int,
    run_cap: int = GESTURE_RUN_CAP,
) -> List[str]:
    """Instructions for a whole plan, opening with the start tap.

    A plan without a start location (board already clear) has no instructions.
    """
    if start_location is None:
        return []
    return [f"Tap on {start_location} to start"] + encode(actions, start_location, region_count, run_cap)

"""Core solving package.

This package contains the exhaustive search engine and the gesture encoder.
"""
from .solver import WheelSolver, SolveResult, get_solver, is_better
from .encoder import (
    GESTURE_RUN_CAP,
    Gesture,
    GestureType,
    decode_gestures,
    encode,
    encode_gestures,
    plan_instructions,
    simulate_gestures,
)

__all__ = [
    "WheelSolver",
    "SolveResult",
    "get_solver",
    "is_better",
    "GESTURE_RUN_CAP",
    "Gesture",
    "GestureType",
    "decode_gestures",
    "encode",
    "encode_gestures",
    "plan_instructions",
    "simulate_gestures",
]

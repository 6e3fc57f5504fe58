"""Board solving and gesture encoding API routes."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ...config import Settings
from ...errors import ErrorCode, SolverError
from ...models.board import format_board, parse_board
from ...models.game import parse_actions
from ...models.schemas import (
    EncodeRequest,
    EncodeResponse,
    ErrorResponse,
    GestureItem,
    SolveRequest,
    SolveResponse,
)
from ...core.encoder import Gesture, encode_gestures, plan_instructions
from ...core.solver import WheelSolver
from ...utils.helpers import normalize_board_text, validate_board_text
from ..deps import get_app_settings, get_wheel_solver


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["solve"])


def _gesture_items(gestures: List[Gesture]) -> List[GestureItem]:
    return [
        GestureItem(**g.to_dict(), instruction=g.to_instruction())
        for g in gestures
    ]


@router.post(
    "/solve",
    response_model=SolveResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def solve_board(
    request: SolveRequest,
    solver: WheelSolver = Depends(get_wheel_solver),
    settings: Settings = Depends(get_app_settings),
) -> SolveResponse:
    """
    Find the best clearing plan for a board.

    Args:
        request: SolveRequest with the board line and optional threshold.
        solver: WheelSolver dependency.
        settings: Application settings dependency.

    Returns:
        SolveResponse with reward, plan, gestures and instructions.
    """
    text = normalize_board_text(request.board)
    is_valid, error = validate_board_text(text, settings.max_regions)
    if not is_valid:
        raise HTTPException(status_code=400, detail=error)

    board = parse_board(text)
    try:
        result = solver.solve_board(board, request.threshold)
    except SolverError as e:
        logger.error("Solve failed for [%s]: %s", format_board(board), e)
        status_code = 500 if e.code == ErrorCode.NO_TERMINAL_STATE else 400
        raise HTTPException(status_code=status_code, detail=str(e))

    gestures = []
    if result.start_location is not None:
        gestures = encode_gestures(
            result.actions, result.start_location, len(board), settings.gesture_run_cap
        )

    return SolveResponse(
        board=format_board(board),
        region_count=len(board),
        start_location=result.start_location,
        reward=result.reward,
        action_count=len(result.actions),
        states_visited=result.states_visited,
        elapsed_ms=result.elapsed_ms,
        actions=[a.value for a in result.actions],
        gestures=_gesture_items(gestures),
        instructions=plan_instructions(
            result.actions, result.start_location, len(board), settings.gesture_run_cap
        ),
    )


@router.post(
    "/encode",
    response_model=EncodeResponse,
    responses={400: {"model": ErrorResponse}},
)
def encode_actions(
    request: EncodeRequest,
    settings: Settings = Depends(get_app_settings),
) -> EncodeResponse:
    """
    Encode an action history as gestures.

    Args:
        request: EncodeRequest with action names, start location and region count.
        settings: Application settings dependency.

    Returns:
        EncodeResponse with gestures and printable instructions.
    """
    if request.start_location >= request.region_count:
        raise HTTPException(
            status_code=400,
            detail=f"Start location {request.start_location} outside board of {request.region_count} regions",
        )

    try:
        actions = parse_actions(request.actions)
        gestures = encode_gestures(
            actions, request.start_location, request.region_count, settings.gesture_run_cap
        )
    except SolverError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return EncodeResponse(
        gestures=_gesture_items(gestures),
        instructions=[g.to_instruction() for g in gestures],
    )

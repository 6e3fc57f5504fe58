"""Board replay and tick preview API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ...config import Settings
from ...errors import SolverError
from ...models.board import advance_tick, format_board, parse_board
from ...models.game import parse_actions, replay
from ...models.schemas import (
    ErrorResponse,
    ReplayRequest,
    ReplayResponse,
    TickRequest,
    TickResponse,
)
from ...utils.helpers import normalize_board_text, validate_board_text
from ..deps import get_app_settings


router = APIRouter(prefix="/api", tags=["board"])


@router.post(
    "/replay",
    response_model=ReplayResponse,
    responses={400: {"model": ErrorResponse}},
)
async def replay_plan(
    request: ReplayRequest,
    settings: Settings = Depends(get_app_settings),
) -> ReplayResponse:
    """
    Play an action history on a board and report where it ends.

    Args:
        request: ReplayRequest with board, start location and actions.
        settings: Application settings dependency.

    Returns:
        ReplayResponse with the final board, cursor and reward.
    """
    text = normalize_board_text(request.board)
    is_valid, error = validate_board_text(text)
    if not is_valid:
        raise HTTPException(status_code=400, detail=error)

    threshold = request.threshold or settings.threshold
    try:
        actions = parse_actions(request.actions)
        state = replay(parse_board(text), request.start_location, actions, threshold)
    except SolverError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ReplayResponse(
        final_board=format_board(state.board),
        cursor=state.cursor,
        reward=state.reward,
        cleared=state.is_cleared,
    )


@router.post(
    "/tick",
    response_model=TickResponse,
    responses={400: {"model": ErrorResponse}},
)
async def preview_ticks(
    request: TickRequest,
    settings: Settings = Depends(get_app_settings),
) -> TickResponse:
    """Show the board after each of the requested ticks."""
    text = normalize_board_text(request.board)
    is_valid, error = validate_board_text(text)
    if not is_valid:
        raise HTTPException(status_code=400, detail=error)

    threshold = request.threshold or settings.threshold
    board = parse_board(text)
    boards = []
    for _ in range(request.ticks):
        board = advance_tick(board, threshold)
        boards.append(format_board(board))

    return TickResponse(boards=boards)

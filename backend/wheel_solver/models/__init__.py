"""Data models package.

This package contains the board and game state models and the API schemas.
"""
from .board import (
    DEAD,
    DEFAULT_THRESHOLD,
    Board,
    Tile,
    TileKind,
    advance_tick,
    format_board,
    is_cleared,
    parse_board,
    ticks_to_clear,
)
from .game import (
    ACTION_ORDER,
    Action,
    GameState,
    StateKey,
    new_game,
    parse_actions,
    replay,
)
from .schemas import (
    SolveRequest,
    SolveResponse,
    EncodeRequest,
    EncodeResponse,
    ReplayRequest,
    ReplayResponse,
    TickRequest,
    TickResponse,
    GestureItem,
    ErrorResponse,
)

__all__ = [
    # Board models
    "DEAD",
    "DEFAULT_THRESHOLD",
    "Board",
    "Tile",
    "TileKind",
    "advance_tick",
    "format_board",
    "is_cleared",
    "parse_board",
    "ticks_to_clear",
    # Game models
    "ACTION_ORDER",
    "Action",
    "GameState",
    "StateKey",
    "new_game",
    "parse_actions",
    "replay",
    # API schemas
    "SolveRequest",
    "SolveResponse",
    "EncodeRequest",
    "EncodeResponse",
    "ReplayRequest",
    "ReplayResponse",
    "TickRequest",
    "TickResponse",
    "GestureItem",
    "ErrorResponse",
]

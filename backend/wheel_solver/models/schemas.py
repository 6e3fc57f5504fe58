"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel, Field
from typing import List, Optional


class SolveRequest(BaseModel):
    """Request schema for solving a board."""
    board: str = Field(..., description="One character per region clockwise from region 0; digits are latent countdowns, anything else is dead")
    threshold: Optional[int] = Field(default=None, ge=1, le=20, description="Strength at which active tiles die")


class GestureItem(BaseModel):
    """Single physical gesture."""
    type: str = Field(..., description="Gesture type (tap_active/tap_region/swipe_region/swipe_active)")
    count: int = Field(default=1, ge=1, description="Taps or rotation steps covered")
    position: Optional[int] = Field(default=None, description="Region the gesture ends on")
    step: int = Field(default=0, ge=-1, le=1, description="Rotation direction (-1 ccw, 1 cw, 0 none)")
    instruction: str = Field(default="", description="Printable instruction")


class SolveResponse(BaseModel):
    """Response schema for a solved board."""
    board: str = Field(..., description="Parsed initial board")
    region_count: int = Field(..., description="Number of regions")
    start_location: Optional[int] = Field(default=None, description="Region to start on (null if already clear)")
    reward: int = Field(..., ge=0, description="Best achievable reward")
    action_count: int = Field(..., ge=0, description="Actions in the best plan")
    states_visited: int = Field(..., ge=0, description="Distinct search states entered")
    elapsed_ms: int = Field(default=0, description="Search time in milliseconds")
    actions: List[str] = Field(default=[], description="Action history of the best plan")
    gestures: List[GestureItem] = Field(default=[], description="Gestures encoding the plan")
    instructions: List[str] = Field(default=[], description="Printable instructions, start line first")


class EncodeRequest(BaseModel):
    """Request schema for encoding an action history."""
    actions: List[str] = Field(..., description="Action names (advance/counter_clockwise/clockwise/collect)")
    start_location: int = Field(..., ge=0, description="Region the session started on")
    region_count: int = Field(..., ge=1, description="Number of regions")


class EncodeResponse(BaseModel):
    """Response schema for encoded gestures."""
    gestures: List[GestureItem] = Field(default=[], description="Encoded gestures")
    instructions: List[str] = Field(default=[], description="Printable instructions")


class ReplayRequest(BaseModel):
    """Request schema for replaying a plan."""
    board: str = Field(..., description="Initial board line")
    start_location: int = Field(..., ge=0, description="Region to start on")
    actions: List[str] = Field(default=[], description="Action names to play")
    threshold: Optional[int] = Field(default=None, ge=1, le=20, description="Strength at which active tiles die")


class ReplayResponse(BaseModel):
    """Response schema for a replayed plan."""
    final_board: str = Field(..., description="Board after the last action")
    cursor: int = Field(..., description="Cursor after the last action")
    reward: int = Field(..., ge=0, description="Reward collected")
    cleared: bool = Field(..., description="Whether every tile is dead")


class TickRequest(BaseModel):
    """Request schema for previewing ticks."""
    board: str = Field(..., description="Initial board line")
    ticks: int = Field(default=1, ge=1, le=100, description="Number of ticks to apply")
    threshold: Optional[int] = Field(default=None, ge=1, le=20, description="Strength at which active tiles die")


class TickResponse(BaseModel):
    """Response schema for tick previews."""
    boards: List[str] = Field(default=[], description="Board after each tick")


class ErrorResponse(BaseModel):
    """Error body returned by HTTPException handlers."""
    detail: str = Field(..., description="Error message")

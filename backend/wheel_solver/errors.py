"""
Error codes and SolverError exception for invariant and input failures.
"""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    CURSOR_UNSET = "CURSOR_UNSET"
    NO_TERMINAL_STATE = "NO_TERMINAL_STATE"
    INVALID_BOARD = "INVALID_BOARD"
    INVALID_ACTION = "INVALID_ACTION"


class SolverError(Exception):
    def __init__(self, code: ErrorCode, message: str = "", details: Optional[Dict[str, Any]] = None):
        super().__init__(message or code.value)
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code.value, "message": str(self), "details": self.details}

"""API routes package.

This package contains all API route handlers for the application.
"""
from . import solve
from . import board

__all__ = [
    "solve",
    "board",
]

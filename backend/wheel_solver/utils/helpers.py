"""Utility helper functions."""
from typing import Optional


def normalize_board_text(text: str) -> str:
    """
    Strip the line terminator a host read along with the board.

    Args:
        text: Raw board line.

    Returns:
        Board line without trailing newline characters.
    """
    return text.rstrip("\r\n")


def validate_board_text(text: str, max_regions: Optional[int] = None) -> tuple[bool, Optional[str]]:
    """
    Validate a board line before solving.

    Any character is a valid region (non-digits are dead tiles), so only the
    board length is checked.

    Args:
        text: Normalized board line.
        max_regions: Largest board accepted, or None for no limit.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not text:
        return False, "Board must have at least one region"

    if max_regions is not None and len(text) > max_regions:
        return False, f"Board has {len(text)} regions, at most {max_regions} are supported"

    return True, None

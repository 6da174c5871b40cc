"""
Type definitions used across layers
"""

from enum import StrEnum


class StatusName(StrEnum):
    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    SOLVED = "solved"


class BoardError(StrEnum):
    """Outcome of validating a requested board size. NO_ERROR is the success value."""

    NO_ERROR = "no error"
    SIZE_TOO_SMALL = "size too small"  # n <= 3
    SIZE_TOO_BIG = "size too big"  # n >= 21, keeps the board playable

"""Game phase of a puzzle, derived from the queens on the board and their conflicts"""

from dataclasses import dataclass
from typing import ClassVar

from src.core.shared_types import StatusName
from src.nqueens.conflicts import Conflicts


@dataclass(frozen=True)
class NotStarted:
    name: ClassVar[StatusName] = StatusName.NOT_STARTED

    size: int


@dataclass(frozen=True)
class InProgress:
    name: ClassVar[StatusName] = StatusName.IN_PROGRESS

    size: int
    queens_placed: int
    conflicts: int


@dataclass(frozen=True)
class Solved:
    name: ClassVar[StatusName] = StatusName.SOLVED

    size: int
    moves: int


GameStatus = NotStarted | InProgress | Solved


def compute_status(
    size: int, queens_placed: int, conflicts: Conflicts, moves: int
) -> GameStatus:
    """
    First match wins:
    1. no queens --> not started
    2. a queen for every row and nobody under attack --> solved
    3. anything else --> in progress (also a full board that still has conflicts)
    """
    if queens_placed == 0:
        return NotStarted(size)
    if queens_placed == size and not conflicts.has_conflicts:
        return Solved(size=size, moves=moves)
    return InProgress(
        size=size,
        queens_placed=queens_placed,
        conflicts=conflicts.conflict_lines_count,
    )

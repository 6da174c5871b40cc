"""Immutable snapshot handed out by the engine after every call"""

from dataclasses import dataclass

from src.nqueens.cell import Cell
from src.nqueens.conflicts import Conflicts
from src.nqueens.status import GameStatus


@dataclass(frozen=True)
class GameState:
    size: int
    queens: frozenset[Cell]
    conflicts: Conflicts
    status: GameStatus

"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Cell:
    row: int
    col: int

    def to_notation(self) -> str:
        return f"{self.row},{self.col}"

    def is_within_bounds(self, size: int) -> bool:
        return (0 <= self.row < size) and (0 <= self.col < size)

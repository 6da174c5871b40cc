"""
Conflict detection between placed queens.

Two queens attack each other when they share an attack line:
* a row (same `row`)
* a column (same `col`)
* a diagonal (same `row - col`)
* an anti-diagonal (same `row + col`)

The board size plays no role in the geometry.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from itertools import combinations
from types import MappingProxyType
from typing import Callable, ClassVar, Iterable, Mapping

from src.nqueens.cell import Cell

LineKeyFn = Callable[[Cell], int]

# Order matters: pairs are reported in the order their lines are discovered.
ATTACK_LINES: dict[str, LineKeyFn] = {
    "row": lambda cell: cell.row,
    "col": lambda cell: cell.col,
    "diagonal": lambda cell: cell.row - cell.col,
    "anti_diagonal": lambda cell: cell.row + cell.col,
}


@dataclass(frozen=True)
class ConflictPair:
    """Two queens attacking each other. Stored smallest cell first, so (a, b) and (b, a) are the same pair."""

    a: Cell
    b: Cell

    @classmethod
    def of(cls, first: Cell, second: Cell) -> ConflictPair:
        return cls(first, second) if first <= second else cls(second, first)


@dataclass(frozen=True)
class Conflicts:
    """Snapshot of who attacks whom. Cells without any attacker are absent from `conflicts_by_cell`."""

    EMPTY: ClassVar[Conflicts]

    conflicts_by_cell: Mapping[Cell, frozenset[Cell]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    pairs: tuple[ConflictPair, ...] = ()

    def __hash__(self) -> int:
        # the pairs determine the mapping, and the mapping proxy is not hashable
        return hash(self.pairs)

    @property
    def has_conflicts(self) -> bool:
        return len(self.pairs) > 0

    @property
    def conflict_lines_count(self) -> int:
        return len(self.pairs)

    @property
    def conflict_cells(self) -> frozenset[Cell]:
        return frozenset(self.conflicts_by_cell.keys())

    def conflicts_for(self, cell: Cell) -> frozenset[Cell]:
        return self.conflicts_by_cell.get(cell, frozenset())


Conflicts.EMPTY = Conflicts()


def detect_conflicts(size: int, queens: Iterable[Cell]) -> Conflicts:
    """
    Compute every attacking relationship among the queens.
    ----

    1. group the queens by each attack line key
    2. keep the lines holding more than one queen
    3. every pair of queens on such a line conflicts: record the pair once, and the edge in both directions

    A queen can sit on several crowded lines at once, its attackers are the union over all of them.
    """
    queens = sorted(set(queens))
    if len(queens) < 2:
        return Conflicts.EMPTY

    conflict_lines = _find_conflict_lines(queens)
    if not conflict_lines:
        return Conflicts.EMPTY

    conflicts_by_cell: dict[Cell, set[Cell]] = defaultdict(set)
    # dict keeps insertion order, so this doubles as an ordered set of pairs
    pairs: dict[ConflictPair, None] = {}
    for line in conflict_lines:
        _process_conflict_line(line, conflicts_by_cell, pairs)

    return Conflicts(
        conflicts_by_cell=MappingProxyType(
            {cell: frozenset(attackers) for cell, attackers in conflicts_by_cell.items()}
        ),
        pairs=tuple(pairs),
    )


def _find_conflict_lines(queens: list[Cell]) -> list[list[Cell]]:
    """Lines (of any kind) with at least two queens on them"""
    conflict_lines: list[list[Cell]] = []
    for line_key in ATTACK_LINES.values():
        grouped: dict[int, list[Cell]] = defaultdict(list)
        for queen in queens:
            grouped[line_key(queen)].append(queen)
        conflict_lines.extend(line for line in grouped.values() if len(line) > 1)
    return conflict_lines


def _process_conflict_line(
    line: list[Cell],
    conflicts_by_cell: dict[Cell, set[Cell]],
    pairs: dict[ConflictPair, None],
) -> None:
    for a, b in combinations(line, 2):
        conflicts_by_cell[a].add(b)
        conflicts_by_cell[b].add(a)
        pairs.setdefault(ConflictPair.of(a, b), None)

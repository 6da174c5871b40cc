"""Unit tests for /src/nqueens/engine.py"""

import pytest

from src.core.shared_types import BoardError
from src.nqueens.cell import Cell
from src.nqueens.conflicts import Conflicts
from src.nqueens.engine import PuzzleEngine
from src.nqueens.game_state import GameState
from src.nqueens.result import Err, Ok
from src.nqueens.status import InProgress, NotStarted, Solved

SOLUTION_4 = [Cell(0, 1), Cell(1, 3), Cell(2, 0), Cell(3, 2)]


@pytest.fixture
def engine() -> PuzzleEngine:
    """Engine with a fresh 4x4 board"""
    engine = PuzzleEngine()
    engine.set_board_size(4)
    return engine


def place_all(engine: PuzzleEngine, cells: list[Cell]) -> GameState:
    state = engine.state
    for cell in cells:
        state = engine.place_queen(cell)
    return state


# -- CREATION / BOARD SIZE --
def test_new_engine_is_uninitialized() -> None:
    engine = PuzzleEngine()
    assert engine.size == 0
    assert engine.queens == frozenset()
    assert engine.moves == 0


def test_set_board_size() -> None:
    engine = PuzzleEngine()
    result = engine.set_board_size(8)

    assert isinstance(result, Ok)
    state = result.value
    assert state.size == 8
    assert state.queens == frozenset()
    assert state.conflicts == Conflicts.EMPTY
    assert state.status == NotStarted(8)


@pytest.mark.parametrize(
    "size, error",
    [(0, BoardError.SIZE_TOO_SMALL), (3, BoardError.SIZE_TOO_SMALL), (21, BoardError.SIZE_TOO_BIG)],
)
def test_invalid_board_size(size: int, error: BoardError) -> None:
    engine = PuzzleEngine()
    assert engine.set_board_size(size) == Err(error)


def test_invalid_board_size_keeps_previous_state() -> None:
    engine = PuzzleEngine()
    engine.set_board_size(8)
    engine.place_queen(Cell(0, 0))

    result = engine.set_board_size(2)

    assert result == Err(BoardError.SIZE_TOO_SMALL)
    state = engine.state
    assert state.size == 8
    assert Cell(0, 0) in state.queens
    assert engine.moves == 1


def test_set_board_size_resets_queens_and_moves(engine: PuzzleEngine) -> None:
    place_all(engine, SOLUTION_4[:2])
    result = engine.set_board_size(6)

    assert isinstance(result, Ok)
    assert result.value.status == NotStarted(6)
    assert engine.queens == frozenset()
    assert engine.moves == 0


def test_set_same_board_size_also_resets(engine: PuzzleEngine) -> None:
    engine.place_queen(Cell(0, 0))
    engine.set_board_size(4)
    assert engine.queens == frozenset()
    assert engine.moves == 0


# -- PLACING / REMOVING QUEENS --
def test_place_queen(engine: PuzzleEngine) -> None:
    state = engine.place_queen(Cell(1, 1))
    assert state.queens == {Cell(1, 1)}
    assert state.status == InProgress(size=4, queens_placed=1, conflicts=0)
    assert engine.moves == 1


def test_place_conflicting_queens(engine: PuzzleEngine) -> None:
    engine.place_queen(Cell(0, 0))
    state = engine.place_queen(Cell(0, 3))

    assert state.conflicts.has_conflicts
    assert state.conflicts.conflicts_for(Cell(0, 0)) == {Cell(0, 3)}
    assert state.status == InProgress(size=4, queens_placed=2, conflicts=1)


def test_duplicate_placement_counts_a_move_but_not_a_queen(engine: PuzzleEngine) -> None:
    engine.place_queen(Cell(2, 2))
    state = engine.place_queen(Cell(2, 2))
    assert state.queens == {Cell(2, 2)}
    assert engine.moves == 2


def test_remove_absent_queen_counts_a_move(engine: PuzzleEngine) -> None:
    state = engine.remove_queen(Cell(3, 3))
    assert state.queens == frozenset()
    assert state.status == NotStarted(4)
    assert engine.moves == 1


def test_place_then_remove_restores_queens(engine: PuzzleEngine) -> None:
    before = place_all(engine, SOLUTION_4[:2]).queens
    engine.place_queen(Cell(3, 3))
    after = engine.remove_queen(Cell(3, 3)).queens
    assert after == before
    assert engine.moves == 4


def test_out_of_range_cells_are_accepted(engine: PuzzleEngine) -> None:
    """The engine does not check bounds (the service does)."""
    state = engine.place_queen(Cell(10, -1))
    assert Cell(10, -1) in state.queens


# -- TOGGLING / RESETTING --
def test_toggle_places_then_removes(engine: PuzzleEngine) -> None:
    placed = engine.toggle_queen(Cell(1, 2))
    assert placed.queens == {Cell(1, 2)}

    removed = engine.toggle_queen(Cell(1, 2))
    assert removed.queens == frozenset()
    assert engine.moves == 2


def test_reset_keeps_size(engine: PuzzleEngine) -> None:
    place_all(engine, SOLUTION_4[:3])
    result = engine.reset()

    assert result == Ok(engine.state)
    assert engine.size == 4
    assert engine.queens == frozenset()
    assert engine.moves == 0


def test_reset_uninitialized_engine() -> None:
    assert PuzzleEngine().reset() == Err(BoardError.SIZE_TOO_SMALL)


# -- STATUS TRANSITIONS --
def test_solve_and_unsolve(engine: PuzzleEngine) -> None:
    """NotStarted --> InProgress --> Solved --> InProgress"""
    assert engine.state.status == NotStarted(4)

    state = place_all(engine, SOLUTION_4)
    assert state.conflicts == Conflicts.EMPTY
    assert state.status == Solved(size=4, moves=4)

    state = engine.remove_queen(SOLUTION_4[0])
    assert state.status == InProgress(size=4, queens_placed=3, conflicts=0)


def test_solved_moves_include_detours(engine: PuzzleEngine) -> None:
    engine.place_queen(Cell(0, 0))
    engine.remove_queen(Cell(0, 0))
    state = place_all(engine, SOLUTION_4)
    assert state.status == Solved(size=4, moves=6)


def test_full_board_with_conflicts_is_not_solved(engine: PuzzleEngine) -> None:
    state = place_all(engine, [Cell(0, 0), Cell(1, 1), Cell(2, 2), Cell(3, 3)])
    assert state.status == InProgress(size=4, queens_placed=4, conflicts=6)


# -- SNAPSHOTS --
def test_snapshots_are_not_affected_by_later_moves(engine: PuzzleEngine) -> None:
    first = engine.place_queen(Cell(0, 1))
    engine.place_queen(Cell(1, 3))
    assert first.queens == {Cell(0, 1)}
    assert first.status == InProgress(size=4, queens_placed=1, conflicts=0)


def test_snapshots_are_frozen(engine: PuzzleEngine) -> None:
    state = engine.place_queen(Cell(0, 1))
    with pytest.raises(AttributeError):
        state.size = 5  # type: ignore[misc]


def test_reading_state_is_not_a_move(engine: PuzzleEngine) -> None:
    engine.place_queen(Cell(0, 1))
    _ = engine.state
    _ = engine.state
    assert engine.moves == 1


def test_engines_are_independent() -> None:
    first, second = PuzzleEngine(), PuzzleEngine()
    first.set_board_size(4)
    second.set_board_size(5)
    first.place_queen(Cell(0, 0))
    assert second.queens == frozenset()
    assert second.size == 5


def test_snapshots_are_hashable(engine: PuzzleEngine) -> None:
    first = engine.place_queen(Cell(0, 0))
    engine.remove_queen(Cell(0, 0))
    again = engine.place_queen(Cell(0, 0))
    assert first == again
    assert {first, again} == {first}

    conflicting = engine.place_queen(Cell(0, 3))
    assert hash(conflicting) == hash(engine.state)

"""
The PuzzleEngine is the entrypoint into the domain layer for the service layer.
It owns the board of a single puzzle (size, queens, move counter) and hands back a fresh GameState after every call.

The rules themselves live in pure functions (board_size, conflicts, status). The engine only keeps state and composes them.
NOTE: not thread-safe. One engine belongs to one caller at a time.
"""

from src.core.shared_types import BoardError
from src.nqueens.board_size import validate_size
from src.nqueens.cell import Cell
from src.nqueens.conflicts import detect_conflicts
from src.nqueens.game_state import GameState
from src.nqueens.result import Err, Ok, Result
from src.nqueens.status import compute_status


class PuzzleEngine:
    def __init__(self) -> None:
        # uninitialized until the first valid set_board_size
        self._size: int = 0
        self._queens: frozenset[Cell] = frozenset()
        self._moves: int = 0

    # --- DOMAIN LAYER API CALLED BY SERVICE ---
    @property
    def size(self) -> int:
        return self._size

    @property
    def queens(self) -> frozenset[Cell]:
        return self._queens

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def state(self) -> GameState:
        """Current snapshot. Reading it does not count as a move."""
        return self._create_game_state()

    def set_board_size(self, size: int) -> Result[GameState, BoardError]:
        """
        (Re)start the puzzle on a board of the given size: clears the queens and the move counter.
        An invalid size leaves everything as it was and comes back as Err.
        """
        error = validate_size(size)
        if error != BoardError.NO_ERROR:
            return Err(error)

        self._size = size
        self._queens = frozenset()
        self._moves = 0
        return Ok(self._create_game_state())

    def place_queen(self, cell: Cell) -> GameState:
        """
        Counts as a move even when a queen already stands on the cell.
        NOTE: the cell is not checked against the board size, the caller only sends cells it has drawn.
        """
        self._moves += 1
        self._queens = self._queens | {cell}
        return self._create_game_state()

    def remove_queen(self, cell: Cell) -> GameState:
        """Counts as a move even when there was no queen on the cell."""
        self._moves += 1
        self._queens = self._queens - {cell}
        return self._create_game_state()

    def toggle_queen(self, cell: Cell) -> GameState:
        """Tapping a cell: take the queen off if there is one, otherwise put one down."""
        if cell in self._queens:
            return self.remove_queen(cell)
        return self.place_queen(cell)

    def reset(self) -> Result[GameState, BoardError]:
        """Start over on the same board. Before the first set_board_size there is no board to reset to."""
        return self.set_board_size(self._size)

    # -- PRIVATE HELPERS ---
    def _create_game_state(self) -> GameState:
        conflicts = detect_conflicts(self._size, self._queens)
        status = compute_status(
            size=self._size,
            queens_placed=len(self._queens),
            conflicts=conflicts,
            moves=self._moves,
        )
        return GameState(
            size=self._size,
            queens=self._queens,
            conflicts=conflicts,
            status=status,
        )

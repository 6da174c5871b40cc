"""Orchestration of communication from API models to the rules engine and the leaderboard persistence (and the reverse direction)."""

import logging
from uuid import UUID, uuid4

from src.api.models import (
    CellRequest,
    CreateSessionRequest,
    GameStateResponse,
    GetSessionRequest,
    LeaderboardRequest,
    LeaderboardResponse,
    RecordScoreRequest,
    RecordScoreResponse,
    SetBoardSizeRequest,
)
from src.core.config import Settings
from src.core.exceptions import (
    GameStateError,
    InvalidBoardSizeError,
    InvalidRequestError,
    SessionNotFoundError,
)
from src.core.shared_types import BoardError
from src.db.repository import ScoreRepository
from src.nqueens.cell import Cell
from src.nqueens.engine import PuzzleEngine
from src.nqueens.game_state import GameState
from src.nqueens.result import Err, Ok, Result
from src.nqueens.status import Solved

logger = logging.getLogger(__name__)


class PuzzleService:
    """
    Orchestration of layers for the N-Queens puzzle.

    Every play session owns its own engine. Engines live in memory only, the repository just keeps the leaderboards.
    NOTE: not thread-safe, same as the engines it holds.
    """

    def __init__(self, repository: ScoreRepository, settings: Settings | None = None) -> None:
        self.repo = repository
        self.settings = settings or Settings()
        self.sessions: dict[UUID, PuzzleEngine] = {}
        # sessions whose current solve is already on the leaderboard
        self.recorded: set[UUID] = set()

    # -- API routes logic ---
    def create_session(self, request: CreateSessionRequest) -> GameStateResponse:
        """New puzzle on a board of the requested size. Nothing is created if the size is invalid."""
        engine = PuzzleEngine()
        state = self._apply_board_size(engine, request.size)

        session_id = uuid4()
        self.sessions[session_id] = engine
        logger.info("Created session %s with a %dx%d board", session_id, state.size, state.size)
        return GameStateResponse.from_state(session_id, state)

    def set_board_size(self, request: SetBoardSizeRequest) -> GameStateResponse:
        """Switch to another board size. On an invalid size, the session keeps its current board."""
        engine = self._fetch_engine(request.session_id)
        state = self._apply_board_size(engine, request.size)
        self.recorded.discard(request.session_id)
        logger.info("Session %s resized to %dx%d", request.session_id, state.size, state.size)
        return GameStateResponse.from_state(request.session_id, state)

    def get_game_state(self, request: GetSessionRequest) -> GameStateResponse:
        engine = self._fetch_engine(request.session_id)
        return GameStateResponse.from_state(request.session_id, engine.state)

    def place_queen(self, request: CellRequest) -> GameStateResponse:
        engine = self._fetch_engine(request.session_id)
        cell = self._checked_cell(engine, request)
        return self._respond(request.session_id, engine.place_queen(cell))

    def remove_queen(self, request: CellRequest) -> GameStateResponse:
        engine = self._fetch_engine(request.session_id)
        cell = self._checked_cell(engine, request)
        return self._respond(request.session_id, engine.remove_queen(cell))

    def toggle_queen(self, request: CellRequest) -> GameStateResponse:
        """What a tap on the board does."""
        engine = self._fetch_engine(request.session_id)
        cell = self._checked_cell(engine, request)
        return self._respond(request.session_id, engine.toggle_queen(cell))

    def reset_game(self, request: GetSessionRequest) -> GameStateResponse:
        """Clear the board, keep the size."""
        engine = self._fetch_engine(request.session_id)
        state = self._unwrap(engine.size, engine.reset())
        self.recorded.discard(request.session_id)
        return GameStateResponse.from_state(request.session_id, state)

    def record_score(self, request: RecordScoreRequest) -> RecordScoreResponse:
        """
        Put a solved puzzle on the leaderboard.
        ----
        The elapsed time comes from the caller (the engine has no clock), the move count from the engine.
        A solve is recorded once. Any move afterwards (or a reset) makes room for the next one.
        """
        engine = self._fetch_engine(request.session_id)
        status = engine.state.status
        if not isinstance(status, Solved):
            raise GameStateError(
                f"Only solved puzzles can be recorded. status: {status.name}"
            )
        if request.session_id in self.recorded:
            raise GameStateError(
                f"This solve was already recorded for session {request.session_id}."
            )

        result = self.repo.record(
            size=status.size,
            time_millis=request.time_millis,
            moves=status.moves,
            limit=self.settings.leaderboard_limit,
        )
        self.recorded.add(request.session_id)
        return RecordScoreResponse.from_result(request.session_id, result)

    def leaderboards(self, request: LeaderboardRequest) -> LeaderboardResponse:
        limit = (
            request.limit
            if request.limit is not None
            else self.settings.leaderboard_limit
        )
        leaderboards = self.repo.leaderboards(request.size, limit)
        return LeaderboardResponse.from_leaderboards(request.size, leaderboards)

    def delete_session(self, request: GetSessionRequest) -> None:
        """Handle a request to drop a play session."""
        self._fetch_engine(request.session_id)
        del self.sessions[request.session_id]
        self.recorded.discard(request.session_id)

    # -- Internal helpers --
    def _apply_board_size(self, engine: PuzzleEngine, size: int) -> GameState:
        return self._unwrap(size, engine.set_board_size(size))

    def _unwrap(self, size: int, result: Result[GameState, BoardError]) -> GameState:
        """Translate the engine's Err result into an exception for the layers above."""
        match result:
            case Ok(value=state):
                return state
            case Err(error=error):
                logger.warning("Rejected board size %d: %s", size, error)
                raise InvalidBoardSizeError(size, error)

    def _checked_cell(self, engine: PuzzleEngine, request: CellRequest) -> Cell:
        """The engine trusts whatever cell it gets, so anything off the board is stopped here."""
        cell = request.to_cell()
        if not cell.is_within_bounds(engine.size):
            logger.warning(
                "Session %s: cell %s is off the %dx%d board",
                request.session_id,
                cell.to_notation(),
                engine.size,
                engine.size,
            )
            raise InvalidRequestError(
                f"Cell {cell.to_notation()} is outside the {engine.size}x{engine.size} board."
            )
        return cell

    def _respond(self, session_id: UUID, state: GameState) -> GameStateResponse:
        self.recorded.discard(session_id)
        if isinstance(state.status, Solved):
            logger.info(
                "Session %s solved the %dx%d board in %d moves",
                session_id,
                state.size,
                state.size,
                state.status.moves,
            )
        return GameStateResponse.from_state(session_id, state)

    def _fetch_engine(self, session_id: UUID) -> PuzzleEngine:
        """Attempt to find the session and raise error if it fails."""
        engine = self.sessions.get(session_id)
        if engine is None:
            raise SessionNotFoundError(f"Session with {session_id=} not found.")
        return engine

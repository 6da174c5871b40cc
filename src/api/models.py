"""Requests and Response models"""

from typing import Optional, Self
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.models import Leaderboards, RecordResult, ScoreModel
from src.core.shared_types import StatusName
from src.nqueens.cell import Cell
from src.nqueens.game_state import GameState
from src.nqueens.status import InProgress, Solved


# --- REQUEST MODELS ---
class CreateSessionRequest(BaseModel):
    size: int


class SetBoardSizeRequest(BaseModel):
    session_id: UUID
    size: int


class CellRequest(BaseModel):
    session_id: UUID
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        # the upper bound depends on the session's board, the service checks that one
        if value < 0:
            raise InvalidRequestError(f"Cell coordinates are zero-indexed, got {value}.")
        return value

    def to_cell(self) -> Cell:
        return Cell(self.row, self.col)


class GetSessionRequest(BaseModel):
    session_id: UUID


class RecordScoreRequest(BaseModel):
    session_id: UUID
    time_millis: int

    @field_validator("time_millis")
    @classmethod
    def validate_time(cls, value: int) -> int:
        if value <= 0:
            raise InvalidRequestError(f"Elapsed time must be positive, got {value}ms.")
        return value


class LeaderboardRequest(BaseModel):
    size: int
    limit: Optional[int] = None

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, value: Optional[int]) -> Optional[int]:
        # None means the configured default
        if value is not None and value <= 0:
            raise InvalidRequestError(f"Leaderboard limit must be positive, got {value}.")
        return value


# --- RESPONSE MODELS ---
class CellResponse(BaseModel):
    row: int
    col: int

    @classmethod
    def from_cell(cls, cell: Cell) -> Self:
        return cls(row=cell.row, col=cell.col)


class ConflictLineResponse(BaseModel):
    """A line to draw between two queens attacking each other"""

    a: CellResponse
    b: CellResponse


class GameStateResponse(BaseModel):
    session_id: UUID
    size: int
    status: StatusName
    queens: list[CellResponse]
    conflict_cells: list[CellResponse]
    conflict_lines: list[ConflictLineResponse]
    queens_placed: int
    conflicts_count: int
    moves: Optional[int]  # only known once solved

    @classmethod
    def from_state(cls, session_id: UUID, state: GameState) -> Self:
        status = state.status
        return cls(
            session_id=session_id,
            size=state.size,
            status=status.name,
            queens=[CellResponse.from_cell(cell) for cell in sorted(state.queens)],
            conflict_cells=[
                CellResponse.from_cell(cell) for cell in sorted(state.conflicts.conflict_cells)
            ],
            conflict_lines=[
                ConflictLineResponse(
                    a=CellResponse.from_cell(pair.a), b=CellResponse.from_cell(pair.b)
                )
                for pair in state.conflicts.pairs
            ],
            queens_placed=len(state.queens),
            conflicts_count=status.conflicts if isinstance(status, InProgress) else 0,
            moves=status.moves if isinstance(status, Solved) else None,
        )


class ScoreResponse(BaseModel):
    size: int
    time_millis: int
    moves: int
    epoch_millis: int

    @classmethod
    def from_model(cls, model: ScoreModel) -> Self:
        return cls(
            size=model.size,
            time_millis=model.time_millis,
            moves=model.moves,
            epoch_millis=model.epoch_millis,
        )


class RecordScoreResponse(BaseModel):
    session_id: UUID
    entry: ScoreResponse
    rank_by_time: int
    rank_by_moves: int

    @classmethod
    def from_result(cls, session_id: UUID, result: RecordResult) -> Self:
        return cls(
            session_id=session_id,
            entry=ScoreResponse.from_model(result.entry),
            rank_by_time=result.rank_by_time,
            rank_by_moves=result.rank_by_moves,
        )


class LeaderboardResponse(BaseModel):
    size: int
    by_time: list[ScoreResponse]
    by_moves: list[ScoreResponse]

    @classmethod
    def from_leaderboards(cls, size: int, leaderboards: Leaderboards) -> Self:
        return cls(
            size=size,
            by_time=[ScoreResponse.from_model(entry) for entry in leaderboards.by_time],
            by_moves=[ScoreResponse.from_model(entry) for entry in leaderboards.by_moves],
        )

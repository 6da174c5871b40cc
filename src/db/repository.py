"""Protocol repository (SQLAlchemy implementation in sql_repository.py, a dict-backed fake will do for tests)"""

from typing import Protocol

from src.core.models import Leaderboards, RecordResult


class ScoreRepository(Protocol):
    """Persistence layer orchestration for the leaderboards"""

    def record(
        self, size: int, time_millis: int, moves: int, limit: int
    ) -> RecordResult:
        """Store a solved game (unless a faster one with the same move count exists) and report its ranks."""
        ...

    def leaderboards(self, size: int, limit: int) -> Leaderboards:
        """Best entries for a board size, ranked by time and by moves."""
        ...

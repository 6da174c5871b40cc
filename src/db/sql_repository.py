"""Implementation of (Score)Repository using SQLAlchemy"""

import logging
import time
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import Leaderboards, RecordResult, ScoreModel
from src.db.schema import DBScore

logger = logging.getLogger(__name__)


def now_millis() -> int:
    return time.time_ns() // 1_000_000


class SQLScoreRepository:
    """Scores stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def record(
        self, size: int, time_millis: int, moves: int, limit: int
    ) -> RecordResult:
        """
        Store a solved game.
        ----

        Only one entry is kept per (size, moves):
        1. none yet --> add the new one
        2. the new time is faster --> it replaces the old one
        3. otherwise --> nothing is stored, and the new entry ranks 0 on both boards
        """
        new_entry = DBScore(
            id=str(uuid4()),
            size=size,
            time_millis=time_millis,
            moves=moves,
            epoch_millis=now_millis(),
        )
        try:
            existing = self._fetch_same_moves(size, moves)
            if existing is None:
                self.db.add(new_entry)
            elif time_millis < existing.time_millis:
                self.db.delete(existing)
                self.db.add(new_entry)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(f"Could not record score for {size=}") from exc

        leaderboards = self.leaderboards(size, limit)
        result = RecordResult(
            entry=self._to_model(new_entry),
            rank_by_time=self._rank(new_entry.id, leaderboards.by_time),
            rank_by_moves=self._rank(new_entry.id, leaderboards.by_moves),
        )
        logger.info(
            "Recorded score size=%d time=%dms moves=%d (rank by time %d, by moves %d)",
            size,
            time_millis,
            moves,
            result.rank_by_time,
            result.rank_by_moves,
        )
        return result

    def leaderboards(self, size: int, limit: int) -> Leaderboards:
        """Best entries for a board size, ranked by time and by moves."""
        by_time = select(DBScore).where(DBScore.size == size).order_by(
            DBScore.time_millis, DBScore.moves
        )
        by_moves = select(DBScore).where(DBScore.size == size).order_by(
            DBScore.moves, DBScore.time_millis
        )
        try:
            return Leaderboards(
                by_time=[self._to_model(row) for row in self.db.scalars(by_time.limit(limit))],
                by_moves=[
                    self._to_model(row) for row in self.db.scalars(by_moves.limit(limit))
                ],
            )
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Could not read leaderboards for {size=}") from exc

    def _fetch_same_moves(self, size: int, moves: int) -> DBScore | None:
        query = select(DBScore).where(DBScore.size == size, DBScore.moves == moves)
        return self.db.scalar(query)

    def _rank(self, score_id: str, ranking: list[ScoreModel]) -> int:
        """1-based position on the leaderboard, 0 if not on it"""
        return next(
            (position for position, entry in enumerate(ranking, start=1) if entry.id == score_id),
            0,
        )

    def _to_model(self, score_db: DBScore) -> ScoreModel:
        """Convert SQLAlchemy model to data transfer model."""
        return ScoreModel(
            id=score_db.id,
            size=score_db.size,
            time_millis=score_db.time_millis,
            moves=score_db.moves,
            epoch_millis=score_db.epoch_millis,
        )

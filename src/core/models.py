"""
Boundary layer data model(s).

These objects are what the Service receives from / hands to the persistence layer.
(Decouples the SQLAlchemy rows from the information that needs to cross the boundary)
"""

from dataclasses import dataclass, field


@dataclass
class ScoreModel:
    """One solved game on the leaderboard."""

    id: str
    size: int
    time_millis: int
    moves: int
    epoch_millis: int


@dataclass
class RecordResult:
    """The stored entry and where it landed. A rank of 0 means it did not make the leaderboard."""

    entry: ScoreModel
    rank_by_time: int
    rank_by_moves: int


@dataclass
class Leaderboards:
    by_time: list[ScoreModel] = field(default_factory=list)
    by_moves: list[ScoreModel] = field(default_factory=list)

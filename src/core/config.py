"""Settings read from the environment (with defaults good enough for local play)"""

import os
from dataclasses import dataclass
from typing import Self

DEFAULT_DATABASE_URL = "sqlite:///nqueens.db"
DEFAULT_LEADERBOARD_LIMIT = 10


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    leaderboard_limit: int = DEFAULT_LEADERBOARD_LIMIT

    @classmethod
    def from_env(cls) -> Self:
        return cls(
            database_url=os.getenv("NQUEENS_DATABASE_URL", DEFAULT_DATABASE_URL),
            leaderboard_limit=int(
                os.getenv("NQUEENS_LEADERBOARD_LIMIT", str(DEFAULT_LEADERBOARD_LIMIT))
            ),
        )

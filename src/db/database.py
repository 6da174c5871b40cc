"""Generate database session"""

from functools import lru_cache
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base


@lru_cache
def build_engine(settings: Settings) -> Engine:
    engine = create_engine(settings.database_url)
    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    return engine


def get_db(settings: Settings | None = None) -> Generator[Session, None, None]:
    session_factory = sessionmaker(bind=build_engine(settings or Settings.from_env()))
    db = session_factory()
    try:
        yield db
    finally:
        db.close()

"""Database tables / schema"""

from sqlalchemy import BigInteger
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class DBScore(Base):
    __tablename__ = "scores"
    id: Mapped[str] = mapped_column(primary_key=True)
    size: Mapped[int] = mapped_column(index=True)
    time_millis: Mapped[int] = mapped_column(BigInteger)
    moves: Mapped[int]
    epoch_millis: Mapped[int] = mapped_column(BigInteger)

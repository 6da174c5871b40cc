"""
Exceptions raised by the service and boundary layers.

NOTE the rules engine itself never raises: an invalid board size comes back as an Err result.
"""

from src.core.shared_types import BoardError


class NQueensError(Exception):
    """Base class for everything raised on purpose by this project."""


class InvalidBoardSizeError(NQueensError):
    def __init__(self, size: int, error: BoardError) -> None:
        super().__init__(f"Invalid board size {size}: {error}")
        self.size = size
        self.error = error


class InvalidRequestError(NQueensError):
    """Raised by request validation. Propagates out of pydantic validators unchanged."""


class GameStateError(NQueensError):
    pass


class SessionNotFoundError(NQueensError):
    pass


class RepositoryError(NQueensError):
    pass

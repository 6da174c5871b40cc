"""Board size rules. The bounds are fixed: below 4 there is no solution worth playing, above 20 the board is unplayable."""

from src.core.shared_types import BoardError

MIN_BOARD_SIZE = 4
MAX_BOARD_SIZE = 20


def validate_size(size: int) -> BoardError:
    if size < MIN_BOARD_SIZE:
        return BoardError.SIZE_TOO_SMALL
    if size > MAX_BOARD_SIZE:
        return BoardError.SIZE_TOO_BIG
    return BoardError.NO_ERROR

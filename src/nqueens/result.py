"""
Success / failure values for operations that can fail without it being exceptional.

Match on them:

    match engine.set_board_size(8):
        case Ok(state): ...
        case Err(error): ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[V]):
    value: V


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Ok[V] | Err[E]

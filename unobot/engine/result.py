"""Command results and error kinds returned by the engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from unobot.engine.card import Card


class ErrorKind(str, Enum):
    """Why a command failed."""

    INVALID_MOVE = "invalid_move"
    NO_CARDS_AVAILABLE = "no_cards_available"
    INVALID_UNO_CALL = "invalid_uno_call"
    PERSISTENCE_UNAVAILABLE = "persistence_unavailable"


@dataclass(frozen=True)
class Result:
    """Outcome of an engine command.

    Expected conditions (illegal move, empty deck, bad UNO call) come back as a
    failed result with a message instead of an exception.
    """

    success: bool
    message: str
    error: Optional[ErrorKind] = None
    card: Optional[Card] = None
    game_over: bool = False

    @classmethod
    def ok(cls, message: str, card: Optional[Card] = None, game_over: bool = False) -> "Result":
        return cls(success=True, message=message, card=card, game_over=game_over)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> "Result":
        return cls(success=False, message=message, error=error)

    def __bool__(self) -> bool:
        return self.success

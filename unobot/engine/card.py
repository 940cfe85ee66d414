"""Card, Color and CardKind types for UNO."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors, in deck generation order."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class CardKind(str, Enum):
    """Card categories."""

    NUMBER = "number"
    ACTION = "action"
    WILD = "wild"


NUMBER_VALUES = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")
ACTION_VALUES = ("skip", "reverse", "draw_two")
WILD_VALUES = ("wild", "wild_draw_four")

CARD_VALUES = NUMBER_VALUES + ACTION_VALUES + WILD_VALUES

_DISPLAY = {
    "skip": "SKIP",
    "reverse": "REVERSE",
    "draw_two": "+2",
    "wild": "WILD",
    "wild_draw_four": "+4",
}

_SYMBOLS = {
    "skip": "⏭",
    "reverse": "↻",
    "draw_two": "+2",
    "wild": "W",
    "wild_draw_four": "+4",
}


def kind_of(value: str) -> CardKind:
    """Return the category a card value belongs to."""
    if value in NUMBER_VALUES:
        return CardKind.NUMBER
    if value in ACTION_VALUES:
        return CardKind.ACTION
    if value in WILD_VALUES:
        return CardKind.WILD
    raise ValueError(f"Invalid card value: {value}")


@dataclass(frozen=True)
class Card:
    """A UNO card.

    For number cards: color is set, value is "0"-"9".
    For action cards: color is set, value is "skip", "reverse" or "draw_two".
    For wild cards: color is None, value is "wild" or "wild_draw_four".
    """

    color: Optional[Color]
    value: str

    def __post_init__(self) -> None:
        kind = kind_of(self.value)
        if kind is CardKind.WILD and self.color is not None:
            raise ValueError("Wild cards must have color=None")
        if kind is not CardKind.WILD and self.color is None:
            raise ValueError("Non-wild cards must have a color")

    @property
    def kind(self) -> CardKind:
        return kind_of(self.value)

    @property
    def rank(self) -> Optional[int]:
        """Face number for number cards, None otherwise."""
        if self.kind is CardKind.NUMBER:
            return int(self.value)
        return None

    @property
    def subtype(self) -> Optional[str]:
        """Action or wild subtype, None for number cards."""
        if self.kind is CardKind.NUMBER:
            return None
        return self.value

    @property
    def is_wild(self) -> bool:
        return self.kind is CardKind.WILD

    @property
    def display(self) -> str:
        return _DISPLAY.get(self.value, self.value)

    @property
    def symbol(self) -> str:
        return _SYMBOLS.get(self.value, self.value)

    def __str__(self) -> str:
        if self.color is None:
            return self.value
        return f"{self.color.value}_{self.value}"

"""Deck creation, shuffling and draw operations."""

import logging
import random
from typing import Iterable, List, Optional, Tuple

from unobot.engine.card import (
    ACTION_VALUES,
    NUMBER_VALUES,
    WILD_VALUES,
    Card,
    CardKind,
    Color,
)

logger = logging.getLogger(__name__)

DECK_SIZE = 108
NUMBER_CARD_COUNT = 76
ACTION_CARD_COUNT = 24
WILD_CARD_COUNT = 8


def create_deck() -> List[Card]:
    """Create a standard 108-card UNO deck in generation order.

    - 4 colors × (one 0, two each of 1-9): 76 cards
    - 4 colors × two each of Skip, Reverse, Draw Two: 24 cards
    - 4 Wild, then 4 Wild Draw Four: 8 cards
    """
    cards: List[Card] = []

    for color in Color:
        # One zero per color
        cards.append(Card(color=color, value="0"))
        for value in NUMBER_VALUES[1:]:
            cards.append(Card(color=color, value=value))
            cards.append(Card(color=color, value=value))
        for value in ACTION_VALUES:
            cards.append(Card(color=color, value=value))
            cards.append(Card(color=color, value=value))

    for value in WILD_VALUES:
        for _ in range(4):
            cards.append(Card(color=None, value=value))

    return cards


class Deck:
    """Draw pile. The top of the stack is the end of the list."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self.initialize()

    def initialize(self) -> None:
        """Replace the contents with a fresh, unshuffled deck."""
        self._cards = create_deck()

    def shuffle(self) -> None:
        # random.shuffle is Fisher-Yates over the injected generator
        self._rng.shuffle(self._cards)

    def draw(self) -> Optional[Card]:
        """Remove and return the top card, or None when the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def draw_many(self, count: int) -> List[Card]:
        """Draw up to ``count`` cards, fewer if the deck runs out."""
        drawn: List[Card] = []
        while len(drawn) < count and self._cards:
            drawn.append(self._cards.pop())
        return drawn

    def remaining_count(self) -> int:
        return len(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def add_cards(self, cards: Iterable[Card]) -> None:
        """Put cards on top of the deck. Callers shuffle afterwards if needed."""
        self._cards.extend(cards)

    def add_to_bottom(self, card: Card) -> None:
        self._cards.insert(0, card)

    def reset(self) -> None:
        """Reinitialize and shuffle for a new game."""
        self.initialize()
        self.shuffle()

    def cards(self) -> Tuple[Card, ...]:
        """Copy of the current order, bottom first."""
        return tuple(self._cards)

    def validate(self) -> bool:
        """Check the deck holds a complete 108-card set."""
        if len(self._cards) != DECK_SIZE:
            logger.warning(
                "Deck validation failed: expected %d cards, got %d",
                DECK_SIZE,
                len(self._cards),
            )
            return False

        numbers = sum(1 for c in self._cards if c.kind is CardKind.NUMBER)
        actions = sum(1 for c in self._cards if c.kind is CardKind.ACTION)
        wilds = sum(1 for c in self._cards if c.kind is CardKind.WILD)
        if (numbers, actions, wilds) != (NUMBER_CARD_COUNT, ACTION_CARD_COUNT, WILD_CARD_COUNT):
            logger.warning(
                "Deck validation failed: %d number, %d action, %d wild cards",
                numbers,
                actions,
                wilds,
            )
            return False
        return True

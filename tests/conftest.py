"""Pytest configuration and shared fixtures."""

import random
from typing import Sequence

import pytest

from unobot.engine import Card, Color, Deck, GameEngine, MemoryStatsStore, Player


def card(spec: str) -> Card:
    """Build a card from a short code: "r5", "gskip", "breverse", "ydraw_two", "wild", "wild_draw_four"."""
    if spec in ("wild", "wild_draw_four"):
        return Card(color=None, value=spec)
    colors = {"r": Color.RED, "g": Color.GREEN, "b": Color.BLUE, "y": Color.YELLOW}
    return Card(color=colors[spec[0]], value=spec[1:])


def cards(*specs: str) -> list[Card]:
    return [card(s) for s in specs]


class StackedDeck(Deck):
    """Deck that never shuffles and deals ``top_first`` in order."""

    def __init__(self, top_first: Sequence[Card]):
        self._top_first = list(top_first)
        super().__init__(rng=random.Random(0))

    def initialize(self) -> None:
        self._cards = list(reversed(self._top_first))

    def shuffle(self) -> None:
        pass


def rigged_engine(
    human_hand: Sequence[Card],
    bot_hand: Sequence[Card],
    start: Card,
    rest: Sequence[Card] = (),
    stats_store=None,
    seed: int = 0,
    names: Sequence[str] = ("You", "Bot"),
) -> GameEngine:
    """Engine whose new game deals exactly the given hands and starting card.

    Both hands must have the same length. ``rest`` stays in the deck, top first.
    """
    assert len(human_hand) == len(bot_hand)
    deck = StackedDeck(list(human_hand) + list(bot_hand) + [start] + list(rest))
    engine = GameEngine(
        deck=deck,
        players=[
            Player(id=1, name=names[0], is_bot=False),
            Player(id=2, name=names[1], is_bot=True),
        ],
        rng=random.Random(seed),
        stats_store=stats_store or MemoryStatsStore(),
        hand_size=len(human_hand),
    )
    engine.new_game()
    return engine


@pytest.fixture
def engine() -> GameEngine:
    """A freshly dealt game with a full shuffled deck."""
    game = GameEngine(rng=random.Random(42))
    game.new_game()
    return game


@pytest.fixture
def stats_store() -> MemoryStatsStore:
    return MemoryStatsStore()

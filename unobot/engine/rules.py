"""UNO rules: legal plays, player actions and the bot policy."""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from unobot.engine.card import Card, CardKind, Color

# Tie-break order when the bot picks a color for a wild card
COLOR_PRECEDENCE = (Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW)

DEFAULT_WILD_COLOR = Color.RED


@dataclass
class PlayCard:
    """Action: play the card at hand_index. For wilds, chosen_color should be set."""

    hand_index: int
    chosen_color: Optional[Color] = None


@dataclass
class DrawCard:
    """Action: draw a card and end the turn."""


@dataclass
class CallUno:
    """Action: declare UNO while holding a single card."""


@dataclass
class NewGame:
    """Action: abandon the current game and deal a new one."""


Action = Union[PlayCard, DrawCard, CallUno, NewGame]


def can_play(card: Card, last_card: Optional[Card], active_color: Optional[Color]) -> bool:
    """Check if a card can be played on the current discard pile.

    ``active_color`` is None only when the starting card was a wild; any card
    may then be played and sets the color.
    """
    if last_card is None:
        return True
    # Wild can always be played
    if card.kind is CardKind.WILD:
        return True
    if active_color is None:
        return True
    # Match by color
    if card.color == active_color:
        return True
    # Match by number
    if card.kind is CardKind.NUMBER and last_card.kind is CardKind.NUMBER:
        return card.rank == last_card.rank
    # Match by action
    if card.kind is CardKind.ACTION and last_card.kind is CardKind.ACTION:
        return card.subtype == last_card.subtype
    return False


def playable_indices(
    hand: Sequence[Card],
    last_card: Optional[Card],
    active_color: Optional[Color],
) -> List[int]:
    """Indices of the cards in ``hand`` that may be played, in hand order."""
    return [i for i, card in enumerate(hand) if can_play(card, last_card, active_color)]


def choose_bot_card(
    hand: Sequence[Card],
    candidates: Sequence[int],
    rng: random.Random,
) -> int:
    """Pick which playable card the bot plays.

    Action cards are preferred, then wilds, then numbers; the choice within a
    category is uniform.
    """
    if not candidates:
        raise ValueError("No playable cards to choose from")
    for kind in (CardKind.ACTION, CardKind.WILD, CardKind.NUMBER):
        group = [i for i in candidates if hand[i].kind is kind]
        if group:
            return rng.choice(group)
    raise AssertionError("unreachable: every card has a kind")


def choose_wild_color(hand: Sequence[Card]) -> Color:
    """Color the bot holds the most of. Ties go by COLOR_PRECEDENCE."""
    counts = {color: 0 for color in COLOR_PRECEDENCE}
    for card in hand:
        if card.color is not None:
            counts[card.color] += 1
    # max() keeps the first of equal keys, i.e. the higher precedence color
    return max(COLOR_PRECEDENCE, key=lambda color: counts[color])


def choose_bot_action(
    hand: Sequence[Card],
    last_card: Optional[Card],
    active_color: Optional[Color],
    rng: random.Random,
) -> Action:
    """The bot's move for the given hand and table."""
    candidates = playable_indices(hand, last_card, active_color)
    if not candidates:
        return DrawCard()
    index = choose_bot_card(hand, candidates, rng)
    chosen_color = None
    if hand[index].is_wild:
        remaining = [c for i, c in enumerate(hand) if i != index]
        chosen_color = choose_wild_color(remaining)
    return PlayCard(hand_index=index, chosen_color=chosen_color)

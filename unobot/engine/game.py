"""The UNO game engine: turn state, card effects and win tracking."""

import logging
import random
from collections import deque
from datetime import datetime, timezone
from typing import Deque, List, Optional, Sequence

from unobot.engine.card import Card, CardKind, Color
from unobot.engine.deck import Deck
from unobot.engine.game_state import (
    HISTORY_LIMIT,
    GameEvent,
    GamePhase,
    GameSnapshot,
    Player,
    PlayerSnapshot,
)
from unobot.engine.result import ErrorKind, Result
from unobot.engine.rules import (
    DEFAULT_WILD_COLOR,
    Action,
    CallUno,
    DrawCard,
    NewGame,
    PlayCard,
    can_play,
    choose_bot_action,
    playable_indices,
)
from unobot.engine.stats import MemoryStatsStore, Stats, StatsStore

logger = logging.getLogger(__name__)

HAND_SIZE = 7

_PENALTY_DRAWS = {"draw_two": 2, "wild_draw_four": 4}


def default_players(human_name: str = "You") -> List[Player]:
    return [
        Player(id=1, name=human_name, is_bot=False),
        Player(id=2, name="Bot", is_bot=True),
    ]


class GameEngine:
    """Owns the deck, discard pile and hands, and enforces the rules.

    Every command returns a ``Result``; callers read state through ``snapshot()``
    and never touch the engine's lists directly.
    """

    def __init__(
        self,
        deck: Optional[Deck] = None,
        players: Optional[Sequence[Player]] = None,
        rng: Optional[random.Random] = None,
        stats_store: Optional[StatsStore] = None,
        hand_size: int = HAND_SIZE,
    ):
        self._rng = rng or random.Random()
        self._deck = deck if deck is not None else Deck(rng=self._rng)
        self._players: List[Player] = list(players) if players is not None else default_players()
        if len(self._players) < 2:
            raise ValueError("UNO needs at least two players")
        self._stats_store: StatsStore = stats_store or MemoryStatsStore()
        self._stats = self._stats_store.load()
        self._hand_size = hand_size

        self._discard: List[Card] = []
        self._current = 0
        self._direction = 1
        self._phase = GamePhase.DEALING
        self._winner: Optional[int] = None
        self._active_color: Optional[Color] = None
        self._uno_called = False
        self._last_card: Optional[Card] = None
        self._history: Deque[GameEvent] = deque(maxlen=HISTORY_LIMIT)

    # -- state ------------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def game_over(self) -> bool:
        return self._phase is GamePhase.FINISHED

    @property
    def stats(self) -> Stats:
        return self._stats

    @property
    def current_player(self) -> Player:
        return self._players[self._current]

    def _next_index(self) -> int:
        return (self._current + self._direction) % len(self._players)

    def snapshot(self) -> GameSnapshot:
        """Read-only copy of the whole game state."""
        players = tuple(PlayerSnapshot.from_player(p) for p in self._players)
        winner = None
        if self._winner is not None:
            winner = players[self._winner]
        return GameSnapshot(
            players=players,
            current_player_index=self._current,
            active_color=self._active_color,
            last_played_card=self._last_card,
            deck_size=self._deck.remaining_count(),
            discard_size=len(self._discard),
            direction=self._direction,
            phase=self._phase,
            winner=winner,
            winner_index=self._winner,
            uno_called=self._uno_called,
            stats=self._stats,
            history=tuple(self._history),
        )

    def _log(self, event: str) -> None:
        player = self.current_player
        self._history.append(
            GameEvent(
                timestamp=datetime.now(timezone.utc).isoformat(),
                event=event,
                player=player.name,
                cards_in_hand=len(player.hand),
            )
        )
        logger.debug("%s (%s, %d cards)", event, player.name, len(player.hand))

    # -- setup ------------------------------------------------------------

    def new_game(self) -> Result:
        """Shuffle a fresh deck, deal the hands and turn up a starting card."""
        self._phase = GamePhase.DEALING
        self._deck.reset()
        self._discard = []
        for player in self._players:
            player.hand = []
        self._current = 0
        self._direction = 1
        self._winner = None
        self._uno_called = False
        self._last_card = None
        self._active_color = None
        self._history.clear()

        for player in self._players:
            player.hand.extend(self._deck.draw_many(self._hand_size))

        start_card = self._seek_start_card()
        if start_card is not None:
            self._discard.append(start_card)
            self._last_card = start_card
            # None for a wild seed: the first play picks the color
            self._active_color = start_card.color

        self._phase = GamePhase.IN_PROGRESS
        self._log("Game started")
        return Result.ok("New game started!")

    def _seek_start_card(self) -> Optional[Card]:
        """Draw until a number card turns up.

        Non-number cards go to the bottom of the deck. Each card is looked at
        once; if none is a number card the last one drawn is used as is.
        """
        attempts = self._deck.remaining_count()
        for attempt in range(attempts):
            card = self._deck.draw()
            if card is None:
                break
            if card.kind is CardKind.NUMBER or attempt == attempts - 1:
                return card
            self._deck.add_to_bottom(card)
        return None

    # -- rules ------------------------------------------------------------

    def can_play_card(self, card: Card) -> bool:
        return can_play(card, self._last_card, self._active_color)

    def get_playable_indices(self) -> List[int]:
        return playable_indices(self.current_player.hand, self._last_card, self._active_color)

    def get_playable_cards(self) -> List[Card]:
        """Cards the current player may play, in hand order."""
        hand = self.current_player.hand
        return [hand[i] for i in self.get_playable_indices()]

    def _check_in_progress(self) -> Optional[Result]:
        if self._phase is GamePhase.FINISHED:
            return Result.fail(ErrorKind.INVALID_MOVE, "Game is over")
        if self._phase is not GamePhase.IN_PROGRESS:
            return Result.fail(ErrorKind.INVALID_MOVE, "Game has not started")
        return None

    # -- commands ---------------------------------------------------------

    def play_card(self, hand_index: int, chosen_color: Optional[Color] = None) -> Result:
        """Play a card from the current player's hand."""
        not_running = self._check_in_progress()
        if not_running is not None:
            return not_running

        player = self.current_player
        if not 0 <= hand_index < len(player.hand):
            return Result.fail(ErrorKind.INVALID_MOVE, "Invalid card selection")
        card = player.hand[hand_index]
        if not self.can_play_card(card):
            return Result.fail(ErrorKind.INVALID_MOVE, f"Cannot play {card} now")
        if card.is_wild and chosen_color is not None:
            try:
                chosen_color = Color(chosen_color)
            except ValueError:
                return Result.fail(ErrorKind.INVALID_MOVE, f"Unknown color: {chosen_color}")

        player.hand.pop(hand_index)
        self._discard.append(card)
        self._last_card = card
        if card.is_wild:
            self._active_color = chosen_color or DEFAULT_WILD_COLOR
            self._log(f"{player.name} played {card.display} (chose {self._active_color.value})")
        else:
            self._active_color = card.color
            self._log(f"{player.name} played {card.display} ({card.color.value})")

        if len(player.hand) == 1:
            self._uno_called = False

        if not player.hand:
            return self._finish(player, card)

        self._apply_effect(card)
        if card.value != "skip":
            self._advance()
        return Result.ok("Card played successfully", card=card)

    def _finish(self, winner: Player, card: Card) -> Result:
        self._phase = GamePhase.FINISHED
        self._winner = self._current
        self._stats = self._stats.record(is_win=not winner.is_bot)
        saved = self._stats_store.save(self._stats)
        if not saved:
            logger.warning("Stats not persisted: %s", saved.message)
        self._log(f"{winner.name} wins!")
        return Result.ok(f"{winner.name} wins!", card=card, game_over=True)

    def _apply_effect(self, card: Card) -> None:
        if card.value == "skip":
            self._log("Skip turn!")
        elif card.value == "reverse":
            self._direction *= -1
            self._log("Direction reversed!")
        elif card.value in _PENALTY_DRAWS:
            count = _PENALTY_DRAWS[card.value]
            victim = self._players[self._next_index()]
            drawn = self._deal_to(victim, count)
            self._advance()
            self._log(f"{victim.name} draws {drawn} cards!")

    def _deal_to(self, player: Player, count: int) -> int:
        """Give up to ``count`` cards to a player, recycling the discard pile if needed."""
        drawn = 0
        for _ in range(count):
            card = self._draw_with_reshuffle()
            if card is None:
                break
            player.hand.append(card)
            drawn += 1
        return drawn

    def _draw_with_reshuffle(self) -> Optional[Card]:
        card = self._deck.draw()
        if card is None:
            self.reshuffle_discard()
            card = self._deck.draw()
        return card

    def _advance(self) -> None:
        self._current = self._next_index()
        self._log(f"{self.current_player.name}'s turn")

    def draw_card(self) -> Result:
        """Current player draws one card; the turn then passes."""
        not_running = self._check_in_progress()
        if not_running is not None:
            return not_running

        player = self.current_player
        card = self._deck.draw()
        message = f"{player.name} drew a card"
        if card is None:
            self.reshuffle_discard()
            card = self._deck.draw()
            message += " (reshuffled deck)"
        if card is None:
            return Result.fail(ErrorKind.NO_CARDS_AVAILABLE, "No cards available")

        player.hand.append(card)
        self._log(message)
        self._advance()
        return Result.ok("Card drawn", card=card)

    def call_uno(self) -> Result:
        not_running = self._check_in_progress()
        if not_running is not None:
            return not_running

        player = self.current_player
        if len(player.hand) != 1:
            return Result.fail(ErrorKind.INVALID_UNO_CALL, "Can only call UNO with one card")
        self._uno_called = True
        self._log(f"{player.name} called UNO!")
        return Result.ok("UNO called!")

    def reshuffle_discard(self) -> None:
        """Move all but the top discard back into the deck and shuffle."""
        if len(self._discard) <= 1:
            return
        top = self._discard.pop()
        self._deck.add_cards(self._discard)
        self._discard = [top]
        self._deck.shuffle()
        self._log("Deck reshuffled")

    def bot_move(self) -> Result:
        """Let the bot policy take the current player's turn."""
        not_running = self._check_in_progress()
        if not_running is not None:
            return not_running

        action = choose_bot_action(
            self.current_player.hand,
            self._last_card,
            self._active_color,
            self._rng,
        )
        return self.apply(action)

    def apply(self, action: Action) -> Result:
        """Dispatch a player action to the matching command."""
        if isinstance(action, PlayCard):
            return self.play_card(action.hand_index, action.chosen_color)
        if isinstance(action, DrawCard):
            return self.draw_card()
        if isinstance(action, CallUno):
            return self.call_uno()
        if isinstance(action, NewGame):
            return self.new_game()
        raise TypeError(f"Unknown action: {action!r}")

    def reset_stats(self) -> Result:
        self._stats = Stats()
        return self._stats_store.save(self._stats)

"""Game state records and read-only snapshots for UNO."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from unobot.engine.card import Card, Color
from unobot.engine.stats import Stats

HISTORY_LIMIT = 50


class GamePhase(str, Enum):
    DEALING = "dealing"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass
class Player:
    """A seat at the table. The hand is owned by the engine."""

    id: int
    name: str
    is_bot: bool = False
    hand: List[Card] = field(default_factory=list)


@dataclass(frozen=True)
class GameEvent:
    """One entry of the game log."""

    timestamp: str
    event: str
    player: str
    cards_in_hand: int


@dataclass(frozen=True)
class PlayerSnapshot:
    id: int
    name: str
    is_bot: bool
    hand: Tuple[Card, ...]

    @classmethod
    def from_player(cls, player: Player) -> "PlayerSnapshot":
        return cls(
            id=player.id,
            name=player.name,
            is_bot=player.is_bot,
            hand=tuple(player.hand),
        )


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable copy of the engine state for rendering."""

    players: Tuple[PlayerSnapshot, ...]
    current_player_index: int
    active_color: Optional[Color]
    last_played_card: Optional[Card]
    deck_size: int
    discard_size: int
    direction: int  # 1 = clockwise, -1 = counter-clockwise
    phase: GamePhase
    winner: Optional[PlayerSnapshot]
    winner_index: Optional[int]
    uno_called: bool
    stats: Stats
    history: Tuple[GameEvent, ...] = ()

    @property
    def current_player(self) -> PlayerSnapshot:
        return self.players[self.current_player_index]

    @property
    def game_over(self) -> bool:
        return self.phase is GamePhase.FINISHED

    def total_cards(self) -> int:
        """Cards across deck, discard pile and all hands."""
        return self.deck_size + self.discard_size + sum(len(p.hand) for p in self.players)


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info.
    """

    player_index: int
    my_name: str
    my_hand: List[Card]
    top_discard: Optional[Card]
    active_color: Optional[Color]
    current_player: str
    is_my_turn: bool
    direction: int
    deck_size: int
    uno_called: bool
    game_over: bool
    winner: Optional[str]
    winner_index: Optional[int]
    player_names: List[str]
    num_cards_per_player: Dict[int, int]  # player index -> count
    history: List[str]  # Recent game events
    stats: Stats

    @classmethod
    def from_snapshot(cls, snapshot: GameSnapshot, player_index: int) -> "PlayerView":
        """Create a player view from a full snapshot, hiding other players' hands."""
        return cls(
            player_index=player_index,
            my_name=snapshot.players[player_index].name,
            my_hand=list(snapshot.players[player_index].hand),
            top_discard=snapshot.last_played_card,
            active_color=snapshot.active_color,
            current_player=snapshot.current_player.name,
            is_my_turn=snapshot.current_player_index == player_index,
            direction=snapshot.direction,
            deck_size=snapshot.deck_size,
            uno_called=snapshot.uno_called,
            game_over=snapshot.game_over,
            winner=snapshot.winner.name if snapshot.winner else None,
            winner_index=snapshot.winner_index,
            player_names=[p.name for p in snapshot.players],
            num_cards_per_player={i: len(p.hand) for i, p in enumerate(snapshot.players)},
            history=[e.event for e in snapshot.history[-10:]],  # Last 10 events
            stats=snapshot.stats,
        )

"""Game engine for UNO."""

from unobot.engine.card import Card, CardKind, Color
from unobot.engine.deck import Deck, create_deck
from unobot.engine.game import GameEngine, default_players
from unobot.engine.game_state import (
    GameEvent,
    GamePhase,
    GameSnapshot,
    Player,
    PlayerSnapshot,
    PlayerView,
)
from unobot.engine.result import ErrorKind, Result
from unobot.engine.rules import (
    Action,
    CallUno,
    DrawCard,
    NewGame,
    PlayCard,
    can_play,
    choose_bot_action,
    choose_wild_color,
)
from unobot.engine.stats import MemoryStatsStore, Stats, StatsStore

__all__ = [
    "Card",
    "CardKind",
    "Color",
    "Deck",
    "create_deck",
    "GameEngine",
    "default_players",
    "GameEvent",
    "GamePhase",
    "GameSnapshot",
    "Player",
    "PlayerSnapshot",
    "PlayerView",
    "ErrorKind",
    "Result",
    "Action",
    "CallUno",
    "DrawCard",
    "NewGame",
    "PlayCard",
    "can_play",
    "choose_bot_action",
    "choose_wild_color",
    "MemoryStatsStore",
    "Stats",
    "StatsStore",
]

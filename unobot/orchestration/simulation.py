"""Bot-vs-bot simulation - run many games and aggregate results."""

import random
from collections import defaultdict
from typing import Optional

from unobot.engine import GameEngine, Player
from unobot.orchestration.game_runner import GameResult, GameRunner


def bot_players(count: int = 2) -> list[Player]:
    return [Player(id=i + 1, name=f"Bot{i + 1}", is_bot=True) for i in range(count)]


def run_simulation(
    num_games: int = 100,
    seed: Optional[int] = None,
    num_players: int = 2,
) -> tuple[dict[str, int], list[GameResult]]:
    """Play ``num_games`` games between bots.

    Each game gets its own seed drawn from ``seed`` so runs are reproducible.

    Returns:
        Wins per bot name and the individual game results.
    """
    rng = random.Random(seed)
    wins: dict[str, int] = defaultdict(int)
    results: list[GameResult] = []

    for _ in range(num_games):
        engine = GameEngine(
            players=bot_players(num_players),
            rng=random.Random(rng.randint(0, 2**31 - 1)),
        )
        result = GameRunner(engine, bot_delay=0).run()
        results.append(result)
        if result.winner:
            wins[result.winner] += 1

    return dict(wins), results

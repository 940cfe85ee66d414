"""Simulate a game between two bots and print the event log."""

import random

from unobot.engine import GameEngine, Player
from unobot.orchestration.game_runner import GameRunner


def main():
    engine = GameEngine(
        players=[
            Player(id=1, name="Bot1", is_bot=True),
            Player(id=2, name="Bot2", is_bot=True),
        ],
        rng=random.Random(42),
    )

    runner = GameRunner(engine, bot_delay=0)
    result = runner.run()

    # The engine keeps only the latest 50 events
    for event in engine.snapshot().history:
        print(f"> [{event.player}, {event.cards_in_hand} cards] {event.event}")

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")


if __name__ == "__main__":
    main()

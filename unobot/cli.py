"""CLI entry point."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO: you against a bot")

DEFAULT_STATS_FILE = Path.home() / ".unobot" / "stats.json"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _stats_store(stats_file: Path, no_save: bool):
    from unobot.engine import MemoryStatsStore
    from unobot.storage import JsonStatsStore

    if no_save:
        return MemoryStatsStore()
    return JsonStatsStore(stats_file)


@app.command()
def play(
    name: str = typer.Option("You", "--name", "-n", envvar="UNO_PLAYER_NAME", help="Your display name"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"),
    bot_delay: float = typer.Option(
        1.0,
        "--bot-delay",
        "-d",
        envvar="UNO_BOT_DELAY",
        min=0.0,
        help="Seconds to wait before each bot move",
    ),
    stats_file: Path = typer.Option(
        DEFAULT_STATS_FILE,
        "--stats-file",
        envvar="UNO_STATS_FILE",
        help="JSON file holding the win/loss record",
    ),
    no_save: bool = typer.Option(False, "--no-save", help="Keep stats in memory only"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log game events"),
) -> None:
    """Play UNO against the bot."""
    from unobot.agents.human_agent import HumanAgent
    from unobot.engine import Deck, GameEngine, default_players
    from unobot.orchestration.game_runner import GameRunner
    from unobot.ui.terminal import TerminalUI

    _configure_logging(verbose)
    if not name.strip():
        raise typer.BadParameter("Name must not be empty", param_hint="--name")

    rng = random.Random(seed)
    engine = GameEngine(
        deck=Deck(rng=rng),
        players=default_players(name.strip()),
        rng=rng,
        stats_store=_stats_store(stats_file, no_save),
    )
    runner = GameRunner(
        engine,
        agent=HumanAgent(name=name.strip()),
        ui=TerminalUI(),
        bot_delay=bot_delay,
    )
    results = runner.play()
    record = engine.stats
    typer.echo(f"Games played this session: {len(results)}")
    typer.echo(f"Record: {record.wins} wins, {record.losses} losses")


@app.command()
def simulate(
    games: int = typer.Option(100, "--games", "-g", min=1, help="Number of games"),
    players: int = typer.Option(2, "--players", "-p", min=2, help="Number of bots at the table"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log game events"),
) -> None:
    """Run bot-vs-bot games."""
    from unobot.orchestration.simulation import run_simulation

    _configure_logging(verbose)
    wins, results = run_simulation(num_games=games, seed=seed, num_players=players)
    stalled = sum(1 for r in results if r.winner is None)
    avg_turns = sum(r.num_turns for r in results) / len(results)
    typer.echo("Simulation results:")
    for pid, w in sorted(wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {pid}: {w} wins")
    typer.echo(f"  unfinished: {stalled}")
    typer.echo(f"Average turns: {avg_turns:.1f}")


@app.command()
def stats(
    reset: bool = typer.Option(False, "--reset", help="Zero the win/loss record"),
    stats_file: Path = typer.Option(
        DEFAULT_STATS_FILE,
        "--stats-file",
        envvar="UNO_STATS_FILE",
        help="JSON file holding the win/loss record",
    ),
) -> None:
    """Show or reset the win/loss record."""
    from unobot.engine import GameEngine

    engine = GameEngine(stats_store=_stats_store(stats_file, no_save=False))
    if reset:
        result = engine.reset_stats()
        if not result:
            typer.secho(result.message, fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        typer.echo("Stats reset.")
    record = engine.stats
    typer.echo(f"Wins: {record.wins}")
    typer.echo(f"Losses: {record.losses}")


if __name__ == "__main__":
    app()

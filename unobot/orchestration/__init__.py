"""Game orchestration."""

from unobot.orchestration.game_runner import GameResult, GameRunner
from unobot.orchestration.simulation import run_simulation

__all__ = ["GameResult", "GameRunner", "run_simulation"]

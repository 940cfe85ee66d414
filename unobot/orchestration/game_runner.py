"""Single game runner."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from unobot.engine import ErrorKind, GameEngine, NewGame, PlayerView, Result

if TYPE_CHECKING:
    from unobot.agent.protocol import AgentProtocol
    from unobot.ui.terminal import TerminalUI

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a game that ended, was abandoned or stalled."""

    winner: Optional[str]
    num_turns: int
    player_names: tuple[str, ...]
    stalled: bool = False


class GameRunner:
    """Runs UNO games between one human agent and bot seats.

    Human commands are applied as soon as the agent returns them. Whenever it
    becomes a bot's turn the runner waits ``bot_delay`` seconds and then lets
    the engine make the bot's move, one move per wait.
    """

    def __init__(
        self,
        engine: GameEngine,
        agent: Optional["AgentProtocol"] = None,
        ui: Optional["TerminalUI"] = None,
        bot_delay: float = 1.0,
        max_turns: int = 1000,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._engine = engine
        self._agent = agent
        self._ui = ui
        self._bot_delay = bot_delay
        self._max_turns = max_turns
        self._sleep = sleep

    def _notify(self, message: str, kind: str = "info") -> None:
        if self._ui is not None:
            self._ui.show_message(message, kind)

    def _human_index(self) -> Optional[int]:
        for i, player in enumerate(self._engine.snapshot().players):
            if not player.is_bot:
                return i
        return None

    def _result(self, num_turns: int, stalled: bool = False) -> GameResult:
        snapshot = self._engine.snapshot()
        return GameResult(
            winner=snapshot.winner.name if snapshot.winner else None,
            num_turns=num_turns,
            player_names=tuple(p.name for p in snapshot.players),
            stalled=stalled,
        )

    def run(self) -> GameResult:
        """Play one game from the deal until someone wins or the human quits."""
        self._engine.new_game()
        human = self._human_index()
        num_turns = 0

        while not self._engine.game_over and num_turns < self._max_turns:
            snapshot = self._engine.snapshot()
            current = snapshot.current_player

            if current.is_bot or self._agent is None or human is None:
                if self._bot_delay > 0:
                    self._sleep(self._bot_delay)
                result = self._engine.bot_move()
                if not result and result.error is ErrorKind.NO_CARDS_AVAILABLE:
                    logger.warning("No cards left to draw for %s, stopping game", current.name)
                    self._notify(result.message, "error")
                    return self._result(num_turns, stalled=True)
                self._notify(f"{current.name}: {result.message}", "info")
                num_turns += 1
                continue

            view = PlayerView.from_snapshot(snapshot, human)
            playable = self._engine.get_playable_indices()
            if self._ui is not None:
                self._ui.render(view, playable)
            action = self._agent.get_action(view, playable)
            if action is None:
                logger.info("%s left the game", current.name)
                return self._result(num_turns)

            result = self._engine.apply(action)
            self._report(result)
            if result and isinstance(action, NewGame):
                num_turns = 0
            elif result and result.card is not None:
                num_turns += 1

        if self._engine.game_over and self._ui is not None and human is not None:
            self._ui.show_game_over(PlayerView.from_snapshot(self._engine.snapshot(), human))
        return self._result(num_turns)

    def _report(self, result: Result) -> None:
        self._notify(result.message, "success" if result else "error")

    def play(self) -> list[GameResult]:
        """Keep playing games while the agent wants another one."""
        results = [self.run()]
        while (
            self._agent is not None
            and self._engine.game_over
            and self._agent.confirm_new_game()
        ):
            results.append(self.run())
        return results

"""Agent protocol - interface that human seats implement."""

from typing import Optional, Protocol

from unobot.engine import Action, PlayerView


class AgentProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(
        self,
        player_view: PlayerView,
        playable: list[int],
    ) -> Optional[Action]:
        """Choose an action given the player view and playable hand indices.

        Args:
            player_view: Filtered view with only this player's hand and public info.
            playable: Indices into ``player_view.my_hand`` that may be played.

        Returns:
            An action, or None to leave the game.
        """
        ...

    def confirm_new_game(self) -> bool:
        """Whether to start another game after one finishes."""
        ...

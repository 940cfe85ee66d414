"""Human agent - reads actions from terminal."""

from typing import Callable, Optional

import typer

from unobot.engine import Action, Color, PlayerView
from unobot.engine.rules import CallUno, DrawCard, NewGame, PlayCard

COLOR_KEYS = {
    "r": Color.RED,
    "g": Color.GREEN,
    "b": Color.BLUE,
    "y": Color.YELLOW,
}


class HumanAgent:
    """Agent that prompts the human for input via terminal.

    Commands: a card number plays it, ``d`` draws, ``u`` calls UNO,
    ``n`` starts a new game and ``q`` quits.
    """

    def __init__(self, name: str = "You", input_fn: Callable[[str], str] = input):
        self._name = name
        self._input = input_fn

    @property
    def name(self) -> str:
        return self._name

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self._input(prompt).strip().lower()
        except EOFError:
            return None

    def get_action(
        self,
        player_view: PlayerView,
        playable: list[int],
    ) -> Optional[Action]:
        while True:
            raw = self._read("Card number, [d]raw, [u]no, [n]ew game or [q]uit: ")
            if raw is None or raw == "q":
                return None
            if raw == "d":
                return DrawCard()
            if raw == "u":
                return CallUno()
            if raw == "n":
                return NewGame()
            if raw.isdigit():
                idx = int(raw)
                if 0 <= idx < len(player_view.my_hand):
                    chosen_color = None
                    if player_view.my_hand[idx].is_wild:
                        chosen_color = self.choose_color()
                        if chosen_color is None:
                            return None
                    # Unplayable picks still go to the engine, which explains why
                    return PlayCard(hand_index=idx, chosen_color=chosen_color)
            typer.echo("Invalid. Try again.")

    def choose_color(self) -> Optional[Color]:
        while True:
            raw = self._read("Choose a color - [r]ed, [g]reen, [b]lue, [y]ellow: ")
            if raw is None:
                return None
            if raw[:1] in COLOR_KEYS:
                return COLOR_KEYS[raw[:1]]
            typer.echo("Invalid. Try again.")

    def confirm_new_game(self) -> bool:
        raw = self._read("Play again? [y/n]: ")
        return raw is not None and raw.startswith("y")

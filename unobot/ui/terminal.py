"""Terminal rendering of game snapshots."""

from typing import Callable, Optional

import typer

from unobot.engine import Card, Color, PlayerView

_CARD_COLORS = {
    Color.RED: typer.colors.RED,
    Color.BLUE: typer.colors.BLUE,
    Color.GREEN: typer.colors.GREEN,
    Color.YELLOW: typer.colors.YELLOW,
}

_MESSAGE_COLORS = {
    "success": typer.colors.GREEN,
    "error": typer.colors.RED,
    "info": typer.colors.CYAN,
}


def format_card(card: Optional[Card]) -> str:
    """Short colored label, e.g. R7, GSKIP, +4."""
    if card is None:
        return "none"
    if card.color is None:
        return typer.style(card.display, fg=typer.colors.MAGENTA, bold=True)
    label = f"{card.color.value[0].upper()}{card.display}"
    return typer.style(label, fg=_CARD_COLORS[card.color], bold=True)


class TerminalUI:
    """Prints the table for one seat and shows engine messages."""

    def __init__(self, echo: Callable[[str], None] = typer.echo):
        self._echo = echo

    def render(self, view: PlayerView, playable: list[int]) -> None:
        color = view.active_color.value.upper() if view.active_color else "ANY"
        direction = "clockwise" if view.direction == 1 else "counter-clockwise"
        opponents = ", ".join(
            f"{view.player_names[i]}: {count}"
            for i, count in view.num_cards_per_player.items()
            if i != view.player_index
        )
        self._echo("")
        self._echo(f"Top card: {format_card(view.top_discard)}   Color: {color}   ({direction})")
        self._echo(f"Deck: {view.deck_size}   Opponents: {opponents}")
        self._echo(f"Wins: {view.stats.wins}   Losses: {view.stats.losses}")
        if view.uno_called:
            self._echo(typer.style("UNO!", fg=typer.colors.YELLOW, bold=True))
        self._echo("Your hand (* = playable):")
        for i, card in enumerate(view.my_hand):
            marker = "*" if i in playable else " "
            self._echo(f" {marker}{i:>2}: {format_card(card)}")

    def show_message(self, message: str, kind: str = "info") -> None:
        self._echo(typer.style(message, fg=_MESSAGE_COLORS.get(kind, typer.colors.WHITE)))

    def show_game_over(self, view: PlayerView) -> None:
        won = view.winner_index == view.player_index
        self._echo("")
        self._echo(
            typer.style(
                "You Win!" if won else "You Lose!",
                fg=typer.colors.GREEN if won else typer.colors.RED,
                bold=True,
            )
        )
        self._echo(f"{view.winner} won the game!")
        self._echo(f"Wins: {view.stats.wins}   Losses: {view.stats.losses}")

"""Terminal user interface."""

from unobot.ui.terminal import TerminalUI, format_card

__all__ = ["TerminalUI", "format_card"]

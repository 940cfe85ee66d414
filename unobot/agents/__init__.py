"""Built-in agents."""

from unobot.agents.human_agent import HumanAgent

__all__ = ["HumanAgent"]

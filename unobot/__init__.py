"""UNO against a bot in the terminal."""

__version__ = "0.1.0"

"""Statistics persistence."""

from unobot.storage.json_store import STATS_KEY, JsonStatsStore

__all__ = ["STATS_KEY", "JsonStatsStore"]

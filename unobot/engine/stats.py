"""Win/loss tally and the store interface the engine saves it through."""

from dataclasses import dataclass
from typing import Optional, Protocol

from unobot.engine.result import Result


@dataclass(frozen=True)
class Stats:
    """Games won and lost by the human player."""

    wins: int = 0
    losses: int = 0

    def record(self, is_win: bool) -> "Stats":
        if is_win:
            return Stats(wins=self.wins + 1, losses=self.losses)
        return Stats(wins=self.wins, losses=self.losses + 1)

    @classmethod
    def from_dict(cls, data: object) -> "Stats":
        """Parse a stored record. Raises ValueError on anything malformed."""
        if not isinstance(data, dict):
            raise ValueError(f"Stats record must be an object, got {type(data).__name__}")
        wins = data.get("wins", 0)
        losses = data.get("losses", 0)
        for count in (wins, losses):
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ValueError(f"Invalid stats record: {data!r}")
        return cls(wins=wins, losses=losses)


class StatsStore(Protocol):
    """Key-value persistence for a single Stats record."""

    def load(self) -> Stats:
        """Return the stored record, or zeros when missing or unreadable."""
        ...

    def save(self, stats: Stats) -> Result:
        ...


class MemoryStatsStore:
    """Keeps stats for the lifetime of the process only."""

    def __init__(self, stats: Optional[Stats] = None):
        self._stats = stats or Stats()

    def load(self) -> Stats:
        return self._stats

    def save(self, stats: Stats) -> Result:
        self._stats = stats
        return Result.ok("Stats saved")

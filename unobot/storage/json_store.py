"""JSON file backed stats store."""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Union

from unobot.engine.result import ErrorKind, Result
from unobot.engine.stats import Stats

logger = logging.getLogger(__name__)

STATS_KEY = "unoStats"


class JsonStatsStore:
    """Stores stats under a fixed key in a JSON file.

    The file holds an object of records, e.g. ``{"unoStats": {"wins": 3, "losses": 1}}``.
    Other keys in the file are preserved on save. Read and write failures are
    logged and never raised.
    """

    def __init__(self, path: Union[str, Path], key: str = STATS_KEY):
        self._path = Path(path).expanduser()
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> Dict[str, object]:
        if not self._path.exists():
            return {}
        data = json.loads(self._path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self._path} does not contain a JSON object")
        return data

    def load(self) -> Stats:
        try:
            record = self._read_all().get(self._key)
            if record is None:
                return Stats()
            return Stats.from_dict(record)
        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning("Failed to load stats from %s: %s", self._path, e)
            return Stats()

    def save(self, stats: Stats) -> Result:
        try:
            try:
                data = self._read_all()
            except ValueError:
                data = {}
            data[self._key] = asdict(stats)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to save stats to %s: %s", self._path, e)
            return Result.fail(ErrorKind.PERSISTENCE_UNAVAILABLE, f"Could not save stats: {e}")
        return Result.ok("Stats saved")

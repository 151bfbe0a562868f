from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Protocol, Union

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "highScore"


class HighScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, value: int) -> None: ...


class MemoryHighScoreStore:
    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.writes = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
        self.writes += 1


class JsonHighScoreStore:
    """Keeps the high score as ``{"highScore": n}`` in a small JSON file.

    Storage problems never reach the game: a missing or unreadable file reads
    as 0 and failed writes are only logged.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> int:
        try:
            if not self.path.exists():
                return 0
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
            value = int(data.get(HIGH_SCORE_KEY, 0))
        except (OSError, ValueError, TypeError, AttributeError, OverflowError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0
        return max(value, 0)

    def save(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as fh:
                json.dump({HIGH_SCORE_KEY: int(value)}, fh)
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
            return
        logger.debug("Saved high score %d to %s", value, self.path)


def open_store(path: Optional[Union[str, Path]]) -> HighScoreStore:
    if path is None:
        return MemoryHighScoreStore()
    return JsonHighScoreStore(path)

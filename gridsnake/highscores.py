"""
highscores.py — Best score per difficulty.

HighScoreLedger keeps the in-memory table; a store object does the I/O.
Any store with load() -> mapping | None and save(mapping) -> bool works;
JsonFileStore is the one the game ships with.

Persistence problems of any kind never reach the game: they are logged and the
ledger carries on with whatever it has (all zeros at worst).
"""

import json
import logging
import os
import tempfile
from typing import Mapping

from .difficulty import Difficulty

logger = logging.getLogger(__name__)


def _defaults() -> dict[Difficulty, int]:
    return {d: 0 for d in Difficulty}


class JsonFileStore:
    """Keeps the score table as one JSON object: {"easy": 0, ...}."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> dict | None:
        """Parsed file contents, or None if there is no file yet."""
        if not os.path.isfile(self.path):
            return None
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def save(self, scores: Mapping[str, int]) -> bool:
        """Write to a temp file beside the target, then swap it in."""
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(dict(scores), f, indent=2)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not save high scores to %s: %s", self.path, exc)
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            return False
        return True


class HighScoreLedger:

    def __init__(self, store=None):
        self._store = store
        self._scores: dict[Difficulty, int] = _defaults()

    def load(self) -> None:
        """Replace the table with the stored one, falling back to zeros."""
        self._scores = _defaults()
        if self._store is None:
            return
        try:
            data = self._store.load()
        except (OSError, ValueError) as exc:
            logger.warning("Could not load high scores, using defaults: %s", exc)
            return
        except Exception:
            logger.exception("High score store failed to load, using defaults")
            return
        if data is None:
            return
        if not isinstance(data, Mapping):
            logger.warning("Ignoring malformed high score data: %r", data)
            return

        for difficulty in Difficulty:
            value = data.get(difficulty.value, 0)
            if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
                self._scores[difficulty] = value
            else:
                logger.warning("Ignoring bad high score for %s: %r",
                               difficulty.value, value)

    def get(self, difficulty) -> int:
        return self._scores[Difficulty(difficulty)]

    def record_if_higher(self, difficulty, score: int) -> bool:
        """Store `score` if it beats the current best; True when updated."""
        difficulty = Difficulty(difficulty)
        if score <= self._scores[difficulty]:
            return False
        self._scores[difficulty] = score
        logger.info("New %s high score: %d", difficulty.value, score)
        self._persist()
        return True

    def as_dict(self) -> dict[str, int]:
        return {d.value: score for d, score in self._scores.items()}

    def _persist(self) -> None:
        if self._store is None:
            return
        try:
            saved = self._store.save(self.as_dict())
        except OSError as exc:
            logger.warning("Could not save high scores: %s", exc)
            return
        except Exception:
            logger.exception("High score store failed to save")
            return
        if not saved:
            logger.warning("High score store reported a failed save")

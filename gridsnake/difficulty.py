"""
difficulty.py — Difficulty profile store.

Immutable tuning records built once from config.DIFFICULTIES.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .config import DIFFICULTIES


class Difficulty(str, Enum):
    EASY   = "easy"
    MEDIUM = "medium"
    HARD   = "hard"


class Theme(str, Enum):
    GREEN = "green"
    BLUE  = "blue"
    RED   = "red"


@dataclass(frozen=True)
class DifficultyProfile:
    label: str
    food_count: int
    tick_interval_ms: int
    theme: Theme


def _build_profiles() -> Mapping[Difficulty, DifficultyProfile]:
    table = {}
    for key, raw in DIFFICULTIES.items():
        table[Difficulty(key)] = DifficultyProfile(
            label=raw["label"],
            food_count=raw["food_count"],
            tick_interval_ms=raw["tick_ms"],
            theme=Theme(raw["theme"]),
        )
    return MappingProxyType(table)


PROFILES = _build_profiles()


def profile_for(difficulty: Difficulty | str) -> DifficultyProfile:
    """Look up a profile by enum member or its string key ("easy", ...)."""
    if not isinstance(difficulty, Difficulty):
        try:
            difficulty = Difficulty(difficulty)
        except ValueError:
            raise KeyError(difficulty) from None
    return PROFILES[difficulty]

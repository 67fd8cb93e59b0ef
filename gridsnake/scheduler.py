"""
scheduler.py — Fixed-interval tick task.

Driven by elapsed frame time instead of wall-clock callbacks, so the
owner decides when time passes (the pygame clock in the game, plain
numbers in tests).
"""

from typing import Callable


class TickTimer:
    """Fires `callback` every `interval_ms` of accumulated time while active."""

    def __init__(self, callback: Callable[[], object]):
        self._callback = callback
        self._interval_ms: int = 0
        self._elapsed_ms: float = 0.0
        self._active: bool = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def start(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        self._interval_ms = interval_ms
        self._elapsed_ms = 0.0
        self._active = True

    def cancel(self) -> None:
        self._active = False
        self._elapsed_ms = 0.0

    def advance(self, elapsed_ms: float) -> bool:
        """
        Add frame time; fire at most once. Returns True if it fired.
        Whole intervals missed during a long frame are dropped, so the
        leftover is always shorter than one interval.
        """
        if not self._active:
            return False
        self._elapsed_ms += elapsed_ms
        if self._elapsed_ms < self._interval_ms:
            return False
        self._elapsed_ms = (self._elapsed_ms - self._interval_ms) % self._interval_ms
        self._callback()
        return True

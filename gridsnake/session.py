"""
session.py — Game session controller.

Glues the model, the tick timer, the high-score ledger and a renderer.
Knows nothing about pygame: key handling lives in controller.py and
drawing in view.py, both of which talk to GameSession only.

Only one session runs at a time. Every (re)start cancels the running
timer before scheduling a new one so two tick streams never overlap.
"""

import logging
from typing import Protocol

from .highscores import HighScoreLedger
from .model import Direction, GameModel, GameOver, SessionState, Snapshot
from .scheduler import TickTimer

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def draw(self, snapshot: Snapshot, high_score: int) -> None: ...


class GameSession:

    def __init__(self, model: GameModel, ledger: HighScoreLedger,
                 renderer: Renderer | None = None):
        self.model = model
        self.ledger = ledger
        self.renderer = renderer
        self.timer = TickTimer(self.model.tick)
        self.last_game_over: GameOver | None = None

        self.model.ledger = ledger
        self.model.add_listener(self._on_snapshot)
        self.model.add_game_over_listener(self._on_game_over)

    # ── Read access ──────────────────────────────────────────────
    @property
    def state(self) -> SessionState:
        return self.model.state

    @property
    def high_score(self) -> int:
        return self.ledger.get(self.model.difficulty)

    # ── Lifecycle commands ───────────────────────────────────────
    def select_difficulty(self, difficulty) -> None:
        self.model.select_difficulty(difficulty)

    def start(self, difficulty=None) -> None:
        self.timer.cancel()
        self.last_game_over = None
        self.model.start(difficulty)
        self.timer.start(self.model.profile.tick_interval_ms)

    def restart(self) -> None:
        """Start again on the selected difficulty (the ended one unless changed)."""
        self.start(self.model.selected)

    def back_to_menu(self) -> None:
        self.timer.cancel()
        self.last_game_over = None
        self.model.reset()

    # ── Input commands ───────────────────────────────────────────
    def request_direction(self, direction: Direction) -> None:
        self.model.request_direction(direction)

    def request_pause_toggle(self) -> None:
        self.model.toggle_pause()

    # ── Time ─────────────────────────────────────────────────────
    def advance(self, elapsed_ms: float) -> bool:
        """Feed frame time to the tick timer; True if a tick fired."""
        return self.timer.advance(elapsed_ms)

    def refresh(self) -> None:
        """Redraw the current state (e.g. after the window was exposed)."""
        self._on_snapshot(self.model.snapshot())

    # ── Model callbacks ──────────────────────────────────────────
    def _on_snapshot(self, snapshot: Snapshot) -> None:
        if self.renderer is not None:
            self.renderer.draw(snapshot, self.high_score)

    def _on_game_over(self, event: GameOver) -> None:
        self.timer.cancel()
        self.last_game_over = event
        logger.debug("Tick timer stopped after %s game over", event.reason)

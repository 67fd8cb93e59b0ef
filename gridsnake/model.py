"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling, no timer.
Exposes a clean API for the session controller to read/write.

Classes:
    Direction     — enum of unit moves on the (row, col) grid
    SessionState  — IDLE / RUNNING / PAUSED / ENDED
    Snapshot      — read-only state handed to the renderer
    GameOver      — emitted once when a session ends
    GameModel     — top-level model; owns snake, food, score, direction
"""

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .config import ROWS, COLS, START_ROW, START_COL, FOOD_SCORE, DEFAULT_DIFFICULTY
from .difficulty import Difficulty, DifficultyProfile, profile_for
from .grid import Cell, in_bounds, neighbour
from .placement import place

logger = logging.getLogger(__name__)


# ─────────────────────────── Direction ───────────────────────────
class Direction(Enum):
    """Unit move as (d_row, d_col); rows grow downwards."""
    UP    = (-1,  0)
    DOWN  = ( 1,  0)
    LEFT  = ( 0, -1)
    RIGHT = ( 0,  1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        d_row, d_col = self.value
        return Direction((-d_row, -d_col))

    def is_opposite(self, other: "Direction") -> bool:
        return self.opposite is other


class SessionState(Enum):
    IDLE    = "idle"
    RUNNING = "running"
    PAUSED  = "paused"
    ENDED   = "ended"


# ─────────────────────────── Events ──────────────────────────────
@dataclass(frozen=True)
class Snapshot:
    snake: tuple[Cell, ...]        # head first
    food: frozenset
    score: int
    state: SessionState
    difficulty: Difficulty
    direction: Direction
    reason: str | None = None   # "wall" | "self" once ENDED
    selected: Difficulty | None = None   # difficulty for the next start
    new_high_score: bool = False


@dataclass(frozen=True)
class GameOver:
    difficulty: Difficulty
    score: int
    reason: str
    new_high_score: bool


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns all game state.
    The session controller calls tick() once per timer interval.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS,
                 rng: random.Random = None, ledger=None):
        self.rows = rows
        self.cols = cols
        self.ledger = ledger
        self._rng = rng or random.Random()
        self._listeners: list = []
        self._game_over_listeners: list = []

        # difficulty of the current (or just ended) session
        self.difficulty: Difficulty = Difficulty(DEFAULT_DIFFICULTY)
        self.selected: Difficulty = self.difficulty
        self.new_high_score: bool = False
        self.state: SessionState = SessionState.IDLE
        self.snake: deque = deque()
        self.food: set = set()
        self.direction: Direction = Direction.RIGHT
        self.pending: Direction = Direction.RIGHT
        self.score: int = 0
        self.end_reason: str | None = None

    # ── Listeners ────────────────────────────────────────────────
    def add_listener(self, callback: Callable[[Snapshot], None]) -> None:
        """Called with a Snapshot after every tick and state transition."""
        self._listeners.append(callback)

    def add_game_over_listener(self, callback: Callable[[GameOver], None]) -> None:
        self._game_over_listeners.append(callback)

    # ── Public API ───────────────────────────────────────────────
    @property
    def profile(self) -> DifficultyProfile:
        return profile_for(self.difficulty)

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def select_difficulty(self, difficulty) -> None:
        """
        Pick the difficulty for the next start(); ignored mid-session.
        An ended session keeps its own difficulty until the next start.
        """
        if self.state in (SessionState.RUNNING, SessionState.PAUSED):
            return
        self.selected = Difficulty(difficulty)
        if self.state is SessionState.IDLE:
            self.difficulty = self.selected
        self._emit()

    def start(self, difficulty=None) -> None:
        """Begin a fresh session, discarding any session in progress."""
        if difficulty is not None:
            self.selected = Difficulty(difficulty)
        self.difficulty = self.selected

        self.snake = deque([Cell(START_ROW, START_COL)])
        self.direction = Direction.RIGHT
        self.pending = Direction.RIGHT
        self.score = 0
        self.food = set()
        self.end_reason = None
        self.new_high_score = False
        for _ in range(self.profile.food_count):
            self._spawn_food()

        self.state = SessionState.RUNNING
        logger.info("Session started on %s with %d food",
                    self.difficulty.value, len(self.food))
        self._emit()

    def reset(self) -> None:
        """Drop back to the idle (level-selection) state."""
        self.snake = deque()
        self.food = set()
        self.score = 0
        self.direction = Direction.RIGHT
        self.pending = Direction.RIGHT
        self.end_reason = None
        self.new_high_score = False
        self.difficulty = self.selected
        self.state = SessionState.IDLE
        self._emit()

    def request_direction(self, new_dir: Direction) -> None:
        """Queue a direction change (ignored if it would reverse the snake)."""
        if self.state is not SessionState.RUNNING:
            return
        if not new_dir.is_opposite(self.direction):
            self.pending = new_dir

    def pause(self) -> None:
        if self.state is SessionState.RUNNING:
            self.state = SessionState.PAUSED
            self._emit()

    def resume(self) -> None:
        if self.state is SessionState.PAUSED:
            self.state = SessionState.RUNNING
            self._emit()

    def toggle_pause(self) -> None:
        if self.state is SessionState.RUNNING:
            self.pause()
        elif self.state is SessionState.PAUSED:
            self.resume()

    def tick(self) -> bool:
        """
        Advance one cell.
        Returns True if the snake moved, False if nothing happened or
        the move ended the session.
        """
        if self.state is not SessionState.RUNNING:
            return False

        self.direction = self.pending
        new_head = neighbour(self.head, self.direction)

        if not in_bounds(new_head, self.rows, self.cols):
            self._game_over("wall")
            return False

        # The tail still counts: it only moves after the head is placed.
        if new_head in self.snake:
            self._game_over("self")
            return False

        self.snake.appendleft(new_head)
        if new_head in self.food:
            self.food.discard(new_head)
            self.score += FOOD_SCORE
            self._spawn_food()
        else:
            self.snake.pop()

        self._emit()
        return True

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=frozenset(self.food),
            score=self.score,
            state=self.state,
            difficulty=self.difficulty,
            direction=self.direction,
            reason=self.end_reason,
            selected=self.selected,
            new_high_score=self.new_high_score,
        )

    # ── Private helpers ──────────────────────────────────────────
    def _spawn_food(self) -> Cell | None:
        cell = place(set(self.snake) | self.food, self.rows, self.cols, self._rng)
        if cell is not None:
            self.food.add(cell)
        return cell

    def _game_over(self, reason: str) -> None:
        self.state = SessionState.ENDED
        self.end_reason = reason

        new_high = False
        if self.ledger is not None:
            new_high = self.ledger.record_if_higher(self.difficulty, self.score)
        self.new_high_score = new_high
        logger.info("Game over on %s (%s): score %d%s", self.difficulty.value,
                    reason, self.score, ", new high score" if new_high else "")

        event = GameOver(self.difficulty, self.score, reason, new_high)
        for callback in self._game_over_listeners:
            callback(event)
        self._emit()

    def _emit(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        for callback in self._listeners:
            callback(snap)

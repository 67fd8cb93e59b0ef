"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame window and event loop.
  - Translate raw keyboard, mouse and touch events into session commands.
  - Feed frame time to the session so its tick timer can fire.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

Keys:
  ARROWS      move (while playing)
  SPACE / P   pause / resume
  1 2 3       choose difficulty (menu and game-over screens)
  ENTER       start (menu) / play again (game over)
  R           restart
  ESC / M     back to the level-selection menu
  Q           quit

The button strip under the board (LEFT UP DOWN RIGHT PAUSE) answers
left clicks and touches.

The controller is the only layer that reads pygame events.
"""

import logging
import sys

import pygame

from .config import WIDTH, HEIGHT, FPS, HIGHSCORE_PATH
from .difficulty import Difficulty
from .highscores import HighScoreLedger, JsonFileStore
from .model import Direction, GameModel, SessionState
from .session import GameSession
from .view import GameView, button_at

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
}

DIFFICULTY_KEYS = {
    pygame.K_1: Difficulty.EASY,
    pygame.K_2: Difficulty.MEDIUM,
    pygame.K_3: Difficulty.HARD,
}

BUTTON_DIRECTIONS = {
    "left":  Direction.LEFT,
    "right": Direction.RIGHT,
    "up":    Direction.UP,
    "down":  Direction.DOWN,
}


class GameController:
    """
    Owns the main loop.
    Glues input and the pygame clock to a GameSession.
    """

    def __init__(self, store=None):
        pygame.init()
        self.screen  = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("SNAKE")
        self.clock   = pygame.time.Clock()
        self.view    = GameView(self.screen)

        ledger = HighScoreLedger(store or JsonFileStore(HIGHSCORE_PATH))
        ledger.load()
        self.session = GameSession(GameModel(), ledger, self.view)
        self.session.refresh()

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        logger.info("Window open, high scores: %s", self.session.ledger.as_dict())
        while True:
            elapsed_ms = self.clock.tick(FPS)
            self._handle_events()
            self.session.advance(elapsed_ms)

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            self._dispatch(event)

    def _dispatch(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._quit()
        elif event.type == pygame.KEYDOWN:
            self._handle_keydown(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # touches also arrive as FINGERDOWN; handle those once
            if not getattr(event, "touch", False):
                self._handle_pointer(event.pos)
        elif event.type == pygame.FINGERDOWN:
            self._handle_pointer((int(event.x * WIDTH), int(event.y * HEIGHT)))
        elif event.type in (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED):
            self.session.refresh()

    def _handle_keydown(self, key: int) -> None:
        # Q quits from any state
        if key == pygame.K_q:
            self._quit()

        state = self.session.state

        if state is SessionState.IDLE:
            self._handle_menu_keys(key)
        elif state is SessionState.RUNNING:
            self._handle_playing_keys(key)
        elif state is SessionState.PAUSED:
            self._handle_paused_keys(key)
        elif state is SessionState.ENDED:
            self._handle_over_keys(key)

    def _handle_pointer(self, pos: tuple[int, int]) -> None:
        """Click or touch on the on-screen control strip."""
        name = button_at(pos)
        if name is None:
            return
        if name == "pause":
            self.session.request_pause_toggle()
        else:
            self.session.request_direction(BUTTON_DIRECTIONS[name])

    # ── Per-state key handlers ────────────────────────────────────
    def _handle_menu_keys(self, key: int) -> None:
        if key in DIFFICULTY_KEYS:
            self.session.select_difficulty(DIFFICULTY_KEYS[key])
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.session.start()

    def _handle_playing_keys(self, key: int) -> None:
        if key in DIRECTION_KEYS:
            self.session.request_direction(DIRECTION_KEYS[key])
        elif key in (pygame.K_SPACE, pygame.K_p):
            self.session.request_pause_toggle()
        elif key == pygame.K_r:
            self.session.restart()
        elif key in (pygame.K_ESCAPE, pygame.K_m):
            self.session.back_to_menu()

    def _handle_paused_keys(self, key: int) -> None:
        if key in (pygame.K_SPACE, pygame.K_p):
            self.session.request_pause_toggle()
        elif key == pygame.K_r:
            self.session.restart()
        elif key in (pygame.K_ESCAPE, pygame.K_m):
            self.session.back_to_menu()

    def _handle_over_keys(self, key: int) -> None:
        if key in DIFFICULTY_KEYS:
            self.session.select_difficulty(DIFFICULTY_KEYS[key])
        elif key in (pygame.K_r, pygame.K_RETURN, pygame.K_KP_ENTER):
            self.session.restart()
        elif key in (pygame.K_ESCAPE, pygame.K_m):
            self.session.back_to_menu()

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        pygame.quit()
        sys.exit()

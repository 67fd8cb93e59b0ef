"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

import os

# ── Grid ──────────────────────────────────────────────────────────
ROWS, COLS      = 40, 40
START_ROW       = 20          # vertical midpoint
START_COL       = 1           # leftmost column
FOOD_SCORE      = 10
PLACEMENT_ATTEMPTS = 100

# ── Window ────────────────────────────────────────────────────────
CELL            = 10
PANEL_H         = 60
GAME_W, GAME_H  = COLS * CELL, ROWS * CELL
OFFSET_X        = 10
OFFSET_Y        = PANEL_H + 10
CONTROLS_Y      = OFFSET_Y + GAME_H + 10   # on-screen button strip
BUTTON_W, BUTTON_H = 70, 40
BUTTON_GAP      = 10
WIDTH           = GAME_W + 2 * OFFSET_X
HEIGHT          = CONTROLS_Y + BUTTON_H + 10
FPS             = 60

# ── Colors ────────────────────────────────────────────────────────
BG          = (10,  10,  15)
EMPTY_COL   = (18,  20,  30)
FOOD_COL    = (255, 228, 77)
UI_COL      = (120, 120, 170)
BLACK       = (0,   0,   0)
PANEL_BG    = (12,  12,  20)
BORDER_COL  = (26,  26,  62)

# Snake colour per difficulty theme: (body, head)
THEMES = {
    "green": ((0,   200, 100), (0,   255, 136)),
    "blue":  ((40,  120, 255), (110, 180, 255)),
    "red":   ((220, 40,  70),  (255, 90,  120)),
}

# ── Gameplay ──────────────────────────────────────────────────────
DIFFICULTIES = {
    "easy":   {"label": "EASY",   "food_count": 2, "tick_ms": 150, "theme": "green"},
    "medium": {"label": "MEDIUM", "food_count": 2, "tick_ms": 100, "theme": "blue"},
    "hard":   {"label": "HARD",   "food_count": 1, "tick_ms": 60,  "theme": "red"},
}
DEFAULT_DIFFICULTY = "easy"

# ── Persistence ───────────────────────────────────────────────────
HIGHSCORE_PATH = os.environ.get(
    "GRIDSNAKE_HIGHSCORES",
    os.path.join(os.path.expanduser("~"), ".gridsnake_highscores.json"),
)

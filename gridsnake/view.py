"""
view.py — View layer.

Full redraw on every call: all 40x40 cells are painted as empty, snake or
food, then the HUD panel, the on-screen control strip and the overlay for
the current session state.
No diffing; the surface is rebuilt from the snapshot alone.

Public API:
    GameView(screen)                  — bind to a pygame surface
    view.draw(snapshot, high_score)   — draw and flip one frame
"""

import math

import pygame

from .config import (
    WIDTH, PANEL_H, GAME_W, GAME_H,
    CONTROLS_Y, BUTTON_W, BUTTON_H, BUTTON_GAP,
    OFFSET_X, OFFSET_Y, CELL, ROWS, COLS,
    BG, EMPTY_COL, FOOD_COL, UI_COL,
    PANEL_BG, BORDER_COL, THEMES,
)
from .difficulty import Difficulty, profile_for
from .grid import Cell, iter_cells
from .model import SessionState, Snapshot


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def theme_colors(difficulty: Difficulty) -> tuple[tuple, tuple]:
    """(body, head) colours for a difficulty's theme."""
    return THEMES[profile_for(difficulty).theme.value]


def cell_rect(cell: Cell) -> pygame.Rect:
    return pygame.Rect(
        OFFSET_X + (cell.col - 1) * CELL,
        OFFSET_Y + (cell.row - 1) * CELL,
        CELL, CELL,
    )


# ─────────────────────── on-screen controls ──────────────────────
CONTROL_BUTTONS = ("left", "up", "down", "right", "pause")


def button_rects() -> dict[str, pygame.Rect]:
    """Buttons laid out left to right, centred in the strip under the board."""
    count = len(CONTROL_BUTTONS)
    x = (WIDTH - (count * BUTTON_W + (count - 1) * BUTTON_GAP)) // 2
    rects = {}
    for name in CONTROL_BUTTONS:
        rects[name] = pygame.Rect(x, CONTROLS_Y, BUTTON_W, BUTTON_H)
        x += BUTTON_W + BUTTON_GAP
    return rects


def button_at(pos: tuple[int, int]) -> str | None:
    for name, rect in button_rects().items():
        if rect.collidepoint(pos):
            return name
    return None


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a Snapshot."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._frame: int = 0

    # ── Main entry ───────────────────────────────────────────────
    def draw(self, snapshot: Snapshot, high_score: int) -> None:
        self._frame += 1
        self.screen.fill(BG)

        self._draw_cells(snapshot)
        self._draw_border(snapshot.difficulty)
        self._draw_panel(snapshot, high_score)
        self._draw_controls(snapshot)

        if snapshot.state is SessionState.IDLE:
            self._draw_menu_overlay(snapshot, high_score)
        elif snapshot.state is SessionState.PAUSED:
            self._draw_paused_overlay()
        elif snapshot.state is SessionState.ENDED:
            self._draw_game_over_overlay(snapshot, high_score)

        pygame.display.flip()

    # ── Board ────────────────────────────────────────────────────
    def _draw_cells(self, snapshot: Snapshot) -> None:
        body_col, head_col = theme_colors(snapshot.difficulty)
        body = set(snapshot.snake)
        head = snapshot.snake[0] if snapshot.snake else None

        for cell in iter_cells(ROWS, COLS):
            if cell == head:
                color = head_col
            elif cell in body:
                color = body_col
            elif cell in snapshot.food:
                color = FOOD_COL
            else:
                color = EMPTY_COL
            # one-pixel gap keeps the grid visible
            pygame.draw.rect(self.screen, color, cell_rect(cell).inflate(-1, -1))

    def _draw_border(self, difficulty: Difficulty) -> None:
        accent, _ = theme_colors(difficulty)
        pygame.draw.rect(self.screen, BORDER_COL,
                         (OFFSET_X - 1, OFFSET_Y - 1, GAME_W + 2, GAME_H + 2), 1)
        size = 14
        ox, oy = OFFSET_X, OFFSET_Y
        for pts in [
            [(ox - 1, oy + size), (ox - 1, oy - 1), (ox + size, oy - 1)],
            [(ox + GAME_W - size, oy + GAME_H), (ox + GAME_W, oy + GAME_H),
             (ox + GAME_W, oy + GAME_H - size)],
        ]:
            pygame.draw.lines(self.screen, accent, False, pts, 2)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, snapshot: Snapshot, high_score: int) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL,
                         (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)
        accent, _ = theme_colors(snapshot.difficulty)

        self.screen.blit(self.font_small.render("SCORE", True, accent), (16, 6))
        self.screen.blit(self.font_big.render(str(snapshot.score), True, accent), (16, 24))

        best = self.font_small.render("BEST", True, UI_COL)
        self.screen.blit(best, best.get_rect(topright=(WIDTH - 16, 6)))
        best_val = self.font_big.render(str(high_score), True, FOOD_COL)
        self.screen.blit(best_val, best_val.get_rect(topright=(WIDTH - 16, 24)))

        label = profile_for(snapshot.difficulty).label
        diff_surf = self.font_small.render(label, True, accent)
        self.screen.blit(diff_surf, diff_surf.get_rect(center=(WIDTH // 2, 20)))

        if snapshot.state is SessionState.PAUSED:
            badge = self.font_tiny.render("[ PAUSED ]", True, FOOD_COL)
            self.screen.blit(badge, badge.get_rect(center=(WIDTH // 2, PANEL_H - 16)))

    # ── On-screen controls ────────────────────────────────────────
    def _draw_controls(self, snapshot: Snapshot) -> None:
        accent, _ = theme_colors(snapshot.difficulty)
        live = snapshot.state in (SessionState.RUNNING, SessionState.PAUSED)
        labels = {"left": "LEFT", "up": "UP", "down": "DOWN", "right": "RIGHT",
                  "pause": "RESUME" if snapshot.state is SessionState.PAUSED else "PAUSE"}
        for name, rect in button_rects().items():
            pygame.draw.rect(self.screen, PANEL_BG, rect, border_radius=6)
            pygame.draw.rect(self.screen, accent if live else BORDER_COL, rect, 1, border_radius=6)
            surf = self.font_tiny.render(labels[name], True, accent if live else UI_COL)
            self.screen.blit(surf, surf.get_rect(center=rect.center))

    # ── Overlay infrastructure ────────────────────────────────────
    def _draw_overlay_base(self) -> None:
        surf = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        surf.fill((5, 5, 12, 215))
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))

    def _draw_title(self, title: str, color: tuple, cy: int) -> int:
        pulse = 0.82 + 0.18 * math.sin(self._frame * 0.3)
        surf = self.font_title.render(title, True, _lerp_color(BG, color, pulse))
        gw, gh = surf.get_width() + 40, surf.get_height() + 12
        glow = pygame.Surface((gw, gh), pygame.SRCALPHA)
        glow.fill(_with_alpha(color, int(35 * pulse)))
        self.screen.blit(glow, (WIDTH // 2 - gw // 2, cy - 6))
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy + surf.get_height() // 2)))
        return cy + surf.get_height() + 14

    def _draw_text_line(self, text: str, color: tuple,
                        cy: int, font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 8

    # ── State overlays ────────────────────────────────────────────
    def _draw_menu_overlay(self, snapshot: Snapshot, high_score: int) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + 40
        cy = self._draw_title("SNAKE", FOOD_COL, cy)
        cy = self._draw_text_line("SELECT DIFFICULTY", UI_COL, cy, self.font_med)
        cy += 8

        for number, difficulty in enumerate(Difficulty, start=1):
            profile = profile_for(difficulty)
            accent, _ = theme_colors(difficulty)
            selected = difficulty is snapshot.difficulty
            text = f"{number}  {profile.label}"
            if selected:
                text = f"►  {text}  ◄"
            color = accent if selected else _lerp_color(UI_COL, accent, 0.3)
            cy = self._draw_text_line(text, color, cy, self.font_med)

        cy += 10
        cy = self._draw_text_line(f"BEST: {high_score}", UI_COL, cy, self.font_small)
        cy += 10
        cy = self._draw_text_line("ENTER  START", FOOD_COL, cy, self.font_small)
        self._draw_text_line("ARROWS MOVE   SPACE PAUSE   ESC MENU",
                             UI_COL, cy, self.font_tiny)

    def _draw_paused_overlay(self) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + GAME_H // 2 - 36
        cy = self._draw_title("PAUSED", FOOD_COL, cy)
        self._draw_text_line("PRESS  SPACE  TO RESUME", UI_COL, cy, self.font_med)

    def _draw_game_over_overlay(self, snapshot: Snapshot, high_score: int) -> None:
        self._draw_overlay_base()
        accent, _ = theme_colors(snapshot.difficulty)

        cy = OFFSET_Y + 60
        cy = self._draw_title("GAME OVER", accent, cy)
        cy = self._draw_text_line(f"FINAL SCORE: {snapshot.score}", FOOD_COL, cy, self.font_med)

        if snapshot.new_high_score:
            cy = self._draw_text_line("★  NEW HIGH SCORE  ★", FOOD_COL, cy, self.font_small)
        else:
            cy = self._draw_text_line(f"BEST: {high_score}", UI_COL, cy, self.font_small)
        cy += 16

        if snapshot.selected is not None and snapshot.selected is not snapshot.difficulty:
            next_accent, _ = theme_colors(snapshot.selected)
            label = profile_for(snapshot.selected).label
            cy = self._draw_text_line(f"NEXT: {label}", next_accent, cy, self.font_tiny)
        cy = self._draw_text_line("R / ENTER  PLAY AGAIN", accent, cy, self.font_small)
        cy = self._draw_text_line("ESC  MENU", UI_COL, cy, self.font_small)
        self._draw_text_line("1-3  CHANGE DIFFICULTY", UI_COL, cy, self.font_tiny)

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "courier", 36, True),
            ("font_big",   "courier", 24, True),
            ("font_med",   "courier", 17, False),
            ("font_small", "courier", 13, True),
            ("font_tiny",  "courier", 11, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except Exception:
                setattr(self, attr, pygame.font.SysFont(None, size))

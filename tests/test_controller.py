import pygame
import pytest

from gridsnake.config import WIDTH, HEIGHT
from gridsnake.controller import GameController
from gridsnake.difficulty import Difficulty
from gridsnake.model import Direction, SessionState
from gridsnake.view import button_at, button_rects

from conftest import FakeStore


@pytest.fixture
def controller(pygame_headless):
    return GameController(store=FakeStore({"easy": 30}))


def test_loads_high_scores_on_open(controller):
    assert controller.session.ledger.get(Difficulty.EASY) == 30
    assert controller.session.state is SessionState.IDLE


def test_menu_keys_pick_difficulty_and_start(controller):
    controller._handle_keydown(pygame.K_3)
    assert controller.session.model.difficulty is Difficulty.HARD
    controller._handle_keydown(pygame.K_RETURN)
    assert controller.session.state is SessionState.RUNNING
    assert controller.session.timer.interval_ms == 60


def test_arrow_keys_steer(controller):
    controller._handle_keydown(pygame.K_RETURN)
    controller._handle_keydown(pygame.K_UP)
    assert controller.session.model.pending is Direction.UP
    controller._handle_keydown(pygame.K_LEFT)   # reverse of committed RIGHT
    assert controller.session.model.pending is Direction.UP


def test_space_toggles_pause(controller):
    controller._handle_keydown(pygame.K_RETURN)
    controller._handle_keydown(pygame.K_SPACE)
    assert controller.session.state is SessionState.PAUSED
    controller._handle_keydown(pygame.K_UP)     # ignored while paused
    assert controller.session.model.pending is Direction.RIGHT
    controller._handle_keydown(pygame.K_SPACE)
    assert controller.session.state is SessionState.RUNNING


def test_escape_returns_to_menu(controller):
    controller._handle_keydown(pygame.K_RETURN)
    controller._handle_keydown(pygame.K_ESCAPE)
    assert controller.session.state is SessionState.IDLE
    assert not controller.session.timer.active


def test_game_over_keys(controller):
    controller._handle_keydown(pygame.K_RETURN)
    model = controller.session.model
    model.request_direction(Direction.UP)
    while model.state is SessionState.RUNNING:
        model.tick()
    assert model.state is SessionState.ENDED

    controller._handle_keydown(pygame.K_2)
    assert model.selected is Difficulty.MEDIUM
    assert model.difficulty is Difficulty.EASY
    controller._handle_keydown(pygame.K_r)
    assert model.state is SessionState.RUNNING
    assert model.difficulty is Difficulty.MEDIUM


def click(controller, name, **extra):
    pos = button_rects()[name].center
    controller._dispatch(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos, **extra))


def test_on_screen_buttons_steer_and_pause(controller):
    controller._handle_keydown(pygame.K_RETURN)
    click(controller, "up")
    assert controller.session.model.pending is Direction.UP
    click(controller, "left")   # reverse of committed RIGHT
    assert controller.session.model.pending is Direction.UP

    click(controller, "pause")
    assert controller.session.state is SessionState.PAUSED
    click(controller, "down")   # ignored while paused
    assert controller.session.model.pending is Direction.UP
    click(controller, "pause")
    assert controller.session.state is SessionState.RUNNING


def test_touch_on_button(controller):
    controller._handle_keydown(pygame.K_RETURN)
    x, y = button_rects()["down"].center
    controller._dispatch(pygame.event.Event(pygame.FINGERDOWN, x=x / WIDTH, y=y / HEIGHT))
    assert controller.session.model.pending is Direction.DOWN


def test_touch_generated_click_is_not_doubled(controller):
    controller._handle_keydown(pygame.K_RETURN)
    click(controller, "pause", touch=True)
    assert controller.session.state is SessionState.RUNNING


def test_clicks_outside_buttons_and_in_menu_do_nothing(controller):
    controller._handle_pointer((5, 5))
    click(controller, "pause")
    assert controller.session.state is SessionState.IDLE
    assert button_at((WIDTH // 2, 5)) is None

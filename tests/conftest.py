import os

# Headless pygame for view/controller tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random

import pygame
import pytest

from gridsnake.highscores import HighScoreLedger
from gridsnake.model import GameModel


class FakeStore:
    """In-memory high score store that records every save."""

    def __init__(self, data=None, fail_load=None, save_ok=True, fail_save=None):
        self.data = data
        self.fail_load = fail_load
        self.save_ok = save_ok
        self.fail_save = fail_save
        self.saves = []

    def load(self):
        if self.fail_load is not None:
            raise self.fail_load
        return self.data

    def save(self, scores):
        if self.fail_save is not None:
            raise self.fail_save
        self.saves.append(dict(scores))
        return self.save_ok


class FakeRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, snapshot, high_score):
        self.frames.append((snapshot, high_score))


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def ledger(store):
    ledger = HighScoreLedger(store)
    ledger.load()
    return ledger


@pytest.fixture
def model(ledger):
    return GameModel(rng=random.Random(1234), ledger=ledger)


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture(scope="session")
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()

"""
placement.py — Random food placement.

Rejection sampling over the whole board with a fixed attempt bound.
A crowded board can make placement fail; callers treat that as a
temporary food shortfall, not an error.
"""

import logging
import random
from typing import Collection

from .config import ROWS, COLS, PLACEMENT_ATTEMPTS
from .grid import Cell

logger = logging.getLogger(__name__)


def place(
    occupied: Collection[Cell],
    rows: int = ROWS,
    cols: int = COLS,
    rng: random.Random = None,
    attempts: int = PLACEMENT_ATTEMPTS,
) -> Cell | None:
    """
    Return a random free cell, or None after `attempts` rejected draws.

    Parameters
    ----------
    occupied : cells that must not be chosen (snake body and existing food)
    rows     : board height
    cols     : board width
    rng      : random source; defaults to the module-level generator
    attempts : maximum number of draws
    """
    rng = rng or random
    for _ in range(attempts):
        cell = Cell(rng.randint(1, rows), rng.randint(1, cols))
        if cell not in occupied:
            return cell

    logger.debug("No free cell found after %d attempts (%d occupied)",
                 attempts, len(occupied))
    return None

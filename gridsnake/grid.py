"""
grid.py — Grid geometry.

Pure coordinate math over the 1-indexed (row, col) board.
Cell index layout is row-major: index = (row - 1) * cols + col.
"""

from typing import Iterator, NamedTuple

from .config import ROWS, COLS


class Cell(NamedTuple):
    """A single board position, 1-indexed."""
    row: int
    col: int


def to_index(cell: Cell, cols: int = COLS) -> int:
    return (cell.row - 1) * cols + cell.col


def to_cell(index: int, cols: int = COLS) -> Cell:
    row = (index - 1) // cols + 1
    return Cell(row, index - (row - 1) * cols)


def in_bounds(cell: Cell, rows: int = ROWS, cols: int = COLS) -> bool:
    return 1 <= cell.row <= rows and 1 <= cell.col <= cols


def neighbour(cell: Cell, direction) -> Cell:
    """The cell one step away from `cell` in `direction` (may be off-board)."""
    d_row, d_col = direction.delta
    return Cell(cell.row + d_row, cell.col + d_col)


def iter_cells(rows: int = ROWS, cols: int = COLS) -> Iterator[Cell]:
    for row in range(1, rows + 1):
        for col in range(1, cols + 1):
            yield Cell(row, col)

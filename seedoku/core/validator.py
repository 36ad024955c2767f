"""Validation utilities for generated grids and revealed puzzles."""

from __future__ import annotations
from typing import List
import numpy as np

from .grid import Grid, GRID_SIZE, EMPTY_CELL

_DIGITS = np.arange(1, GRID_SIZE + 1, dtype=np.int32)


def is_full_grid(grid: Grid) -> bool:
    """
    Check that every row, column and square is a permutation of 1-9.
    
    Args:
        grid: The grid to check.
        
    Returns:
        True if the grid is a complete, valid solution.
    """
    values = grid.values
    rows_ok = np.array_equal(np.sort(values, axis=1), np.tile(_DIGITS, (GRID_SIZE, 1)))
    cols_ok = np.array_equal(np.sort(values, axis=0), np.tile(_DIGITS[:, None], (1, GRID_SIZE)))
    if not (rows_ok and cols_ok):
        return False
    return all(
        np.array_equal(np.sort(grid.get_square(i)), _DIGITS)
        for i in range(GRID_SIZE)
    )


def is_masking_of(puzzle: Grid, full: Grid) -> bool:
    """
    Check that ``puzzle`` only hides cells of ``full`` and never alters them.
    
    Returns:
        True if every puzzle cell is 0 or equal to the same cell in ``full``.
    """
    shown = puzzle.values != EMPTY_CELL
    return bool(np.array_equal(puzzle.values[shown], full.values[shown]))


def square_reveal_counts(puzzle: Grid) -> List[int]:
    """Revealed cells per square, by square index."""
    return puzzle.square_counts()


def square_spread(puzzle: Grid) -> int:
    """Difference between the most and least revealed squares."""
    counts = square_reveal_counts(puzzle)
    return max(counts) - min(counts)


def is_fair(puzzle: Grid) -> bool:
    """Check that per-square reveal counts differ by at most one."""
    return square_spread(puzzle) <= 1

"""Core module for grid representation, validation and seeded randomness."""

from .errors import (
    SeedokuError,
    ShapeMismatchError,
    InvalidComplexityError,
    GenerationExhaustedError,
)
from .grid import Grid, FullGrid, PuzzleGrid, BOX_SIZE, GRID_SIZE, EMPTY_CELL
from .rng import SeededRandom
from .validator import is_full_grid, is_masking_of, is_fair, square_reveal_counts, square_spread

__all__ = [
    "SeedokuError",
    "ShapeMismatchError",
    "InvalidComplexityError",
    "GenerationExhaustedError",
    "Grid",
    "FullGrid",
    "PuzzleGrid",
    "BOX_SIZE",
    "GRID_SIZE",
    "EMPTY_CELL",
    "SeededRandom",
    "is_full_grid",
    "is_masking_of",
    "is_fair",
    "square_reveal_counts",
    "square_spread",
]

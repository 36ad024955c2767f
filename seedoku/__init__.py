"""Deterministic seeded Sudoku grid generator and fair cell revealer."""

from .core import (
    FullGrid,
    PuzzleGrid,
    SeedokuError,
    ShapeMismatchError,
    InvalidComplexityError,
    GenerationExhaustedError,
)
from .generator import Complexity, GridGenerator, CellRevealer, generate, reveal

__version__ = "1.0.0"

__all__ = [
    "FullGrid",
    "PuzzleGrid",
    "SeedokuError",
    "ShapeMismatchError",
    "InvalidComplexityError",
    "GenerationExhaustedError",
    "Complexity",
    "GridGenerator",
    "CellRevealer",
    "generate",
    "reveal",
]

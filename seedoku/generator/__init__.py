"""Generator module for full grids and revealed puzzles."""

from .complexity import Complexity, REVEAL_RANGES
from .generator import GridGenerator, GenerationStats, generate, DEFAULT_MAX_ATTEMPTS
from .revealer import CellRevealer, reveal

__all__ = [
    "Complexity",
    "REVEAL_RANGES",
    "GridGenerator",
    "GenerationStats",
    "generate",
    "DEFAULT_MAX_ATTEMPTS",
    "CellRevealer",
    "reveal",
]

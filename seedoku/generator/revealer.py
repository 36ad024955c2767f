"""Derive puzzles from full grids by revealing a fair share of each square."""

from __future__ import annotations
import logging
from typing import Dict, Mapping, Optional, Tuple, Union

import numpy as np

from ..core.errors import InvalidComplexityError
from ..core.grid import FullGrid, PuzzleGrid, GRID_SIZE, EMPTY_CELL
from ..core.rng import SeededRandom
from .complexity import Complexity, REVEAL_RANGES

logger = logging.getLogger(__name__)

_MAX_REVEALED = GRID_SIZE * GRID_SIZE


class CellRevealer:
    """
    Hides cells of a full grid, keeping revealed cells spread evenly.
    
    The total number of revealed cells is drawn from the range for the
    requested complexity, then split across the nine squares so that no two
    squares differ by more than one revealed cell. Which squares receive the
    extra cell, and which positions are shown inside each square, are drawn
    from the same seeded stream, so a (grid, complexity, seed) triple always
    yields the same puzzle.
    """
    
    def __init__(self, reveal_ranges: Optional[Mapping[Complexity, Tuple[int, int]]] = None):
        """
        Initialize the revealer.
        
        Args:
            reveal_ranges: Optional replacement for REVEAL_RANGES, mapping each
                           complexity to a half-open [low, high) range.
        """
        ranges = dict(REVEAL_RANGES if reveal_ranges is None else reveal_ranges)
        for complexity, (low, high) in ranges.items():
            if not 0 <= low < high <= _MAX_REVEALED + 1:
                raise ValueError(f"Invalid reveal range [{low}, {high}) for {complexity}")
        self.reveal_ranges: Dict[Complexity, Tuple[int, int]] = ranges
    
    def reveal(
        self,
        full_grid: FullGrid,
        complexity: Union[Complexity, str],
        seed: Optional[int] = None
    ) -> PuzzleGrid:
        """
        Reveal a subset of ``full_grid``.
        
        Args:
            full_grid: The solution to mask.
            complexity: Difficulty tier, or its name.
            seed: Seed for the reveal draws. Defaults to ``full_grid.seed``.
            
        Returns:
            A PuzzleGrid with hidden cells set to 0.
            
        Raises:
            InvalidComplexityError: If the complexity is unknown.
        """
        complexity = Complexity.parse(complexity)
        if complexity not in self.reveal_ranges:
            raise InvalidComplexityError(f"No reveal range configured for {complexity.value}")
        if seed is None:
            seed = full_grid.seed
        
        rng = SeededRandom(seed)
        low, high = self.reveal_ranges[complexity]
        total = rng.randrange(low, high)
        
        values = np.full((GRID_SIZE, GRID_SIZE), EMPTY_CELL, dtype=np.int32)
        for square, count in self.allocate(total, rng).items():
            for position in rng.permutation(GRID_SIZE)[:count]:
                row, col = full_grid.square_cell(square, position)
                values[row, col] = full_grid.values[row, col]
        
        logger.debug("Revealed %d cells (%s, seed %d)", total, complexity.value, seed)
        return PuzzleGrid(values, full_grid, complexity, seed)
    
    @staticmethod
    def allocate(total: int, rng: SeededRandom) -> Dict[int, int]:
        """
        Split ``total`` reveals across the squares.
        
        Every square gets ``total // 9``; the first ``total % 9`` squares of a
        random square order get one more.
        
        Returns:
            Square index -> reveal count, in the drawn square order.
        """
        if total < 0 or total > _MAX_REVEALED:
            raise ValueError(f"total must be 0-{_MAX_REVEALED}, got {total}")
        base, extra = divmod(total, GRID_SIZE)
        order = rng.permutation(GRID_SIZE)
        return {square: base + (1 if i < extra else 0) for i, square in enumerate(order)}


def reveal(
    full_grid: FullGrid,
    complexity: Union[Complexity, str],
    seed: Optional[int] = None
) -> PuzzleGrid:
    """Reveal a puzzle from ``full_grid`` using the default reveal ranges."""
    return CellRevealer().reveal(full_grid, complexity, seed)

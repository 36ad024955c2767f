"""Seeded generator for complete Sudoku grids."""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..core.errors import GenerationExhaustedError
from ..core.grid import FullGrid, BOX_SIZE, GRID_SIZE, EMPTY_CELL
from ..core.rng import SeededRandom

logger = logging.getLogger(__name__)

# Mean attempts per seed is around 1350; the worst of the first 10k seeds needs ~15k.
DEFAULT_MAX_ATTEMPTS = 100_000


@dataclass
class GenerationStats:
    """Statistics from the last generator run."""
    seed: int = 0
    attempts: int = 0
    time_seconds: float = 0.0
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "seed": self.seed,
            "attempts": self.attempts,
            "time_seconds": self.time_seconds,
        }


class GridGenerator:
    """
    Generator for complete Sudoku grids from an integer seed.
    
    Algorithm:
    1. Shuffle the digits 1-9 for each row, top to bottom
    2. Walk the row left to right; when a digit clashes with the column above
       or its square, swap it with the next untried digit further along
    3. If a column runs out of digits, throw the grid away and start again
       from an empty grid, drawing from the same random stream
    
    The result is a pure function of the seed. The retry loop is bounded by
    ``max_attempts`` and, optionally, a wall-clock timeout.
    """
    
    def __init__(self, max_attempts: int = DEFAULT_MAX_ATTEMPTS, timeout_seconds: Optional[float] = None):
        """
        Initialize the generator.
        
        Args:
            max_attempts: Whole-grid attempts allowed before giving up.
            timeout_seconds: Optional deadline per call, checked between attempts.
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")
        
        self.max_attempts = max_attempts
        self.timeout_seconds = timeout_seconds
        self.stats = GenerationStats()
    
    def generate(self, seed: int) -> FullGrid:
        """
        Generate the full grid for a seed.
        
        Args:
            seed: Integer seed.
            
        Returns:
            A FullGrid.
            
        Raises:
            GenerationExhaustedError: If the attempt limit or timeout is hit.
        """
        rng = SeededRandom(seed)
        start = time.perf_counter()
        deadline = None if self.timeout_seconds is None else start + self.timeout_seconds
        
        for attempt in range(1, self.max_attempts + 1):
            values = [[EMPTY_CELL] * GRID_SIZE for _ in range(GRID_SIZE)]
            if self._try_fill(rng, values):
                self.stats = GenerationStats(seed, attempt, time.perf_counter() - start)
                logger.debug("Generated grid for seed %d in %d attempts", seed, attempt)
                return FullGrid(values, seed)
            
            if deadline is not None and time.perf_counter() > deadline:
                self.stats = GenerationStats(seed, attempt, time.perf_counter() - start)
                raise GenerationExhaustedError(seed, attempt, f"timeout of {self.timeout_seconds}s exceeded")
        
        self.stats = GenerationStats(seed, self.max_attempts, time.perf_counter() - start)
        raise GenerationExhaustedError(seed, self.max_attempts)
    
    def generate_batch(self, seeds: Iterable[int]) -> List[FullGrid]:
        """
        Generate one grid per seed.
        
        Args:
            seeds: Seeds to generate, in order.
            
        Returns:
            List of FullGrids.
        """
        return [self.generate(seed) for seed in seeds]
    
    def _try_fill(self, rng: SeededRandom, values: List[List[int]]) -> bool:
        """Fill ``values`` row by row. Returns False on a dead end."""
        for row in range(GRID_SIZE):
            candidates = rng.permutation(range(1, GRID_SIZE + 1))
            
            for col in range(GRID_SIZE):
                swap_idx = col + 1
                candidate = candidates[col]
                
                while self._conflicts(values, row, col, candidate):
                    if swap_idx >= GRID_SIZE:
                        return False
                    candidates[col], candidates[swap_idx] = candidates[swap_idx], candidate
                    candidate = candidates[col]
                    swap_idx += 1
                
                values[row][col] = candidate
        
        return True
    
    @staticmethod
    def _conflicts(values: List[List[int]], row: int, col: int, candidate: int) -> bool:
        """Check the column above (row, col) and the rest of its square."""
        for r in range(row):
            if values[r][col] == candidate:
                return True
        
        box_row, box_col = FullGrid.square_origin(FullGrid.square_index(row, col))
        for r in range(box_row, box_row + BOX_SIZE):
            for c in range(box_col, box_col + BOX_SIZE):
                if (r, c) != (row, col) and values[r][c] == candidate:
                    return True
        
        return False


def generate(
    seed: int,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    timeout_seconds: Optional[float] = None
) -> FullGrid:
    """Generate the full grid for a seed with a fresh GridGenerator."""
    return GridGenerator(max_attempts, timeout_seconds).generate(seed)

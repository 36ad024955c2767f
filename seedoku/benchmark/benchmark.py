"""Benchmark for grid generation and cell revealing across many seeds."""

from __future__ import annotations
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import numpy as np
from tqdm import tqdm

from ..core.errors import GenerationExhaustedError
from ..core.validator import is_full_grid, is_masking_of
from ..generator import Complexity, GridGenerator, CellRevealer, DEFAULT_MAX_ATTEMPTS

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Results from generating and revealing a single seed."""
    seed: int
    attempts: int
    time_seconds: float
    exhausted: bool = False
    reveal_counts: Dict[str, int] = field(default_factory=dict)
    square_counts: Dict[str, List[int]] = field(default_factory=dict)

    @property
    def square_spread(self) -> Dict[str, int]:
        """Max minus min per-square reveal count, by complexity."""
        return {name: max(counts) - min(counts) for name, counts in self.square_counts.items()}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "seed": self.seed,
            "attempts": self.attempts,
            "time_seconds": self.time_seconds,
            "exhausted": self.exhausted,
            "reveal_counts": self.reveal_counts,
            "square_counts": self.square_counts,
            "square_spread": self.square_spread,
        }


class GenerationBenchmark:
    """
    Runs the generator and revealer over a range of seeds.

    Records how many whole-grid attempts each seed needs, how long it takes,
    and how many cells each complexity reveals per square. Every generated grid
    and puzzle is checked for validity and masking along the way.
    """

    def __init__(
        self,
        count: int = 100,
        start_seed: int = 0,
        seeds: Optional[Iterable[int]] = None,
        complexities: Optional[List[Complexity]] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS
    ):
        """
        Initialize the benchmark.

        Args:
            count: Number of consecutive seeds to run, starting at start_seed.
            start_seed: First seed when ``seeds`` is not given.
            seeds: Explicit seeds to run instead of a consecutive range.
            complexities: Complexities to reveal for each grid (default: all).
            max_attempts: Attempt limit passed to the generator.
        """
        self.seeds = list(seeds) if seeds is not None else list(range(start_seed, start_seed + count))
        self.complexities = complexities or list(Complexity)
        self.generator = GridGenerator(max_attempts=max_attempts)
        self.revealer = CellRevealer()
        self.results: List[GenerationResult] = []

    def run(self, show_progress: bool = True) -> List[GenerationResult]:
        """
        Run the benchmark over all seeds.

        Returns:
            List of GenerationResult objects.
        """
        self.results = []

        for seed in tqdm(self.seeds, desc="Generating", disable=not show_progress):
            self.results.append(self._run_single(seed))

        return self.results

    def _run_single(self, seed: int) -> GenerationResult:
        """Generate one seed and reveal it at every complexity."""
        try:
            full = self.generator.generate(seed)
        except GenerationExhaustedError as e:
            logger.warning("%s", e)
            stats = self.generator.stats
            return GenerationResult(seed, e.attempts, stats.time_seconds, exhausted=True)

        if not is_full_grid(full):
            raise RuntimeError(f"Generated grid for seed {seed} is not a valid solution")

        stats = self.generator.stats
        result = GenerationResult(seed, stats.attempts, stats.time_seconds)

        for complexity in self.complexities:
            puzzle = self.revealer.reveal(full, complexity)
            if not is_masking_of(puzzle, full):
                raise RuntimeError(f"Puzzle for seed {seed} alters solution values")
            result.reveal_counts[complexity.value] = puzzle.revealed_count
            result.square_counts[complexity.value] = puzzle.square_counts()

        return result

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        completed = [r for r in self.results if not r.exhausted]
        summary: Dict[str, Any] = {
            "total_seeds": len(self.results),
            "completed": len(completed),
            "exhausted": [r.seed for r in self.results if r.exhausted],
            "max_attempts": self.generator.max_attempts,
            "attempts": {},
            "time_seconds": {},
            "results_by_complexity": {},
        }

        if completed:
            attempts = np.array([r.attempts for r in completed])
            times = np.array([r.time_seconds for r in completed])
            summary["attempts"] = {
                "mean": float(attempts.mean()),
                "median": float(np.median(attempts)),
                "max": int(attempts.max()),
                "min": int(attempts.min()),
            }
            summary["time_seconds"] = {
                "mean": float(times.mean()),
                "max": float(times.max()),
                "total": float(times.sum()),
            }

        for complexity in self.complexities:
            name = complexity.value
            counts = [r.reveal_counts[name] for r in completed if name in r.reveal_counts]
            spreads = [r.square_spread[name] for r in completed if name in r.square_counts]
            if counts:
                low, high = self.revealer.reveal_ranges[complexity]
                summary["results_by_complexity"][name] = {
                    "range": [low, high],
                    "avg_revealed": sum(counts) / len(counts),
                    "min_revealed": min(counts),
                    "max_revealed": max(counts),
                    "in_range": all(low <= c < high for c in counts),
                    "max_square_spread": max(spreads),
                }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save per-seed results and the summary as JSON."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "generation_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "generation_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        logger.info("Results saved to %s", output_dir)

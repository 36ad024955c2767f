"""Benchmark module for generation statistics across seeds."""

from .benchmark import GenerationBenchmark, GenerationResult
from .visualizer import Visualizer

__all__ = ["GenerationBenchmark", "GenerationResult", "Visualizer"]

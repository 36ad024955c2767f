"""Visualization utilities for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import GenerationResult


class Visualizer:
    """
    Chart generator for generation benchmark results.

    Shows how hard seeds are to generate and how evenly each complexity
    reveals cells across the squares.
    """

    # Color palette for complexities
    COLORS = {
        "easy": "#2ecc71",    # Green
        "medium": "#f39c12",  # Orange
        "hard": "#e74c3c",    # Red
    }

    def __init__(self, results: List[GenerationResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = [r for r in results if not r.exhausted]
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def _complexities(self) -> List[str]:
        names = []
        for r in self.results:
            for name in r.reveal_counts:
                if name not in names:
                    names.append(name)
        return names

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        charts = [
            self.plot_attempts_distribution(),
            self.plot_time_distribution(),
        ]
        if self._complexities():
            charts.append(self.plot_reveal_counts())
            charts.append(self.plot_square_heatmap())
        return charts

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def plot_attempts_distribution(self) -> str:
        """Histogram of whole-grid attempts needed per seed."""
        fig, ax = plt.subplots(figsize=(10, 6))

        attempts = [r.attempts for r in self.results]
        sns.histplot(attempts, bins=30, ax=ax, color="#3498db", edgecolor='black')
        if attempts:
            mean = np.mean(attempts)
            ax.axvline(mean, color="#e74c3c", linestyle='--', label=f'Mean: {mean:.0f}')
            ax.legend()

        ax.set_xlabel('Attempts', fontsize=12)
        ax.set_ylabel('Seeds', fontsize=12)
        ax.set_title('Generation Attempts per Seed', fontsize=14, fontweight='bold')

        return self._save("attempts_distribution.png")

    def plot_time_distribution(self) -> str:
        """Histogram of generation time per seed."""
        fig, ax = plt.subplots(figsize=(10, 6))

        times_ms = [r.time_seconds * 1000 for r in self.results]
        sns.histplot(times_ms, bins=30, ax=ax, color="#9b59b6", edgecolor='black')

        ax.set_xlabel('Time (ms)', fontsize=12)
        ax.set_ylabel('Seeds', fontsize=12)
        ax.set_title('Generation Time per Seed', fontsize=14, fontweight='bold')

        return self._save("time_distribution.png")

    def plot_reveal_counts(self) -> str:
        """Box plot of revealed cell counts by complexity."""
        fig, ax = plt.subplots(figsize=(10, 6))

        names = self._complexities()
        data = [[r.reveal_counts[name] for r in self.results if name in r.reveal_counts] for name in names]

        bp = ax.boxplot(data, patch_artist=True)
        for patch, name in zip(bp['boxes'], names):
            patch.set_facecolor(self.COLORS.get(name, "#95a5a6"))
            patch.set_alpha(0.7)

        ax.set_xticks(range(1, len(names) + 1))
        ax.set_xticklabels([n.capitalize() for n in names])
        ax.set_xlabel('Complexity', fontsize=12)
        ax.set_ylabel('Revealed Cells', fontsize=12)
        ax.set_title('Revealed Cells by Complexity', fontsize=14, fontweight='bold')

        return self._save("reveal_counts.png")

    def plot_square_heatmap(self) -> str:
        """Heatmap of mean revealed cells per square for each complexity."""
        names = self._complexities()
        fig, axes = plt.subplots(1, len(names), figsize=(5 * len(names), 4.5), squeeze=False)

        for ax, name in zip(axes[0], names):
            counts = np.array([r.square_counts[name] for r in self.results if name in r.square_counts])
            mean = counts.mean(axis=0).reshape(3, 3)
            sns.heatmap(mean, annot=True, fmt=".2f", cmap="viridis", cbar=False,
                        square=True, ax=ax, xticklabels=False, yticklabels=False)
            ax.set_title(name.capitalize(), fontsize=12, fontweight='bold')

        fig.suptitle('Mean Revealed Cells per Square', fontsize=14, fontweight='bold')

        return self._save("square_heatmap.png")

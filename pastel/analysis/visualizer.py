"""Visualization utilities for rich pastel summaries."""

from __future__ import annotations
import os
from typing import Dict, List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .summary import SolutionSummary


class Visualizer:
    """
    Chart generator for a summary of rich pastels.

    Each chart is a bar chart of one breakdown, saved as a PNG.
    """

    # Color palette for ingredients
    COLORS = {
        "dulce": "#e84393",     # Pink
        "fruta": "#e74c3c",     # Red
        "confite": "#f39c12",   # Orange
        "masita": "#8e6e53",    # Brown
    }

    def __init__(self, summary: SolutionSummary, output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            summary: Summary of a finished search.
            output_dir: Directory to save generated charts.
        """
        self.summary = summary
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        # Set style
        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_by_leftover(),
            self.plot_by_rich_line_count(),
            self.plot_by_line(),
        ]

    def plot_by_leftover(self) -> str:
        """Bar chart of rich pastels by the ingredient left out."""
        names = list(self.summary.by_leftover)
        colors = [self.COLORS.get(name, "#95a5a6") for name in names]
        return self._bar_chart(
            self.summary.by_leftover,
            colors,
            xlabel='Leftover Ingredient',
            title='Rich Pastels by Leftover Ingredient',
            filename="by_leftover.png",
        )

    def plot_by_rich_line_count(self) -> str:
        """Bar chart of rich pastels by how many of their lines are rich."""
        counts = {str(n): count for n, count in self.summary.by_rich_line_count.items()}
        colors = sns.color_palette("Blues_d", len(counts))
        return self._bar_chart(
            counts,
            colors,
            xlabel='Rich Lines per Pastel',
            title='Rich Pastels by Number of Rich Lines',
            filename="by_rich_line_count.png",
        )

    def plot_by_line(self) -> str:
        """Bar chart of how often each row and column is rich."""
        colors = sns.color_palette("husl", len(self.summary.by_line))
        return self._bar_chart(
            self.summary.by_line,
            colors,
            xlabel='Line',
            title='Rich Pastels by Rich Line',
            filename="by_line.png",
        )

    def _bar_chart(
        self,
        counts: Dict[str, int],
        colors,
        xlabel: str,
        title: str,
        filename: str,
    ) -> str:
        fig, ax = plt.subplots(figsize=(10, 6))

        labels = [label.capitalize() for label in counts]
        values = np.array(list(counts.values()))
        bars = ax.bar(labels, values, color=colors, edgecolor='black', linewidth=0.5)

        # Add value labels on bars
        for bar, value in zip(bars, values):
            ax.annotate(f'{value:,}',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel(xlabel, fontsize=12)
        ax.set_ylabel('Rich Pastels', fontsize=12)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, filename)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

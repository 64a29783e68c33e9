"""Depth-first backtracking search over the ingredient pool."""

from __future__ import annotations
from typing import Sequence

from tqdm import tqdm

from .base_solver import BaseSolver
from ..core.ingredients import PASTEL_SIZE


class BacktrackingSolver(BaseSolver):
    """
    Exhaustive search using recursive backtracking.

    Every ordered choice of nine distinct pool slots is placed into the
    pastel, cell by cell. Pool slots holding the same ingredient yield the
    same pastel many times over; the signature set collapses them.
    Richness is only checked once the pastel is complete.
    """

    name = "Backtracking"

    def _search(self, first_slots: Sequence[int]) -> None:
        """Search every subtree rooted at one of first_slots."""
        with tqdm(total=len(first_slots), desc=self.name, disable=not self.show_progress) as pbar:
            for slot in first_slots:
                self._backtrack(0, (slot,))
                pbar.update(1)

    def _backtrack(self, use_count: int, slots: Sequence[int]) -> None:
        """
        Recursive backtracking step.

        Args:
            use_count: Number of cells already filled.
            slots: Pool slots to try for the next cell, in order.
        """
        if use_count == PASTEL_SIZE:
            self._check_pastel()
            return

        all_slots = range(len(self.ingredients))
        for i in slots:
            if self.used[i]:
                continue

            self.pastel[use_count] = self.ingredients[i]
            self.used[i] = True
            self.stats.nodes_explored += 1
            try:
                self._backtrack(use_count + 1, all_slots)
            finally:
                self.used[i] = False
                self.stats.backtracks += 1

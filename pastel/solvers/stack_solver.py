"""Backtracking search driven by an explicit stack instead of recursion."""

from __future__ import annotations
from typing import List, Sequence

from tqdm import tqdm

from .base_solver import BaseSolver
from ..core.ingredients import PASTEL_SIZE


class StackSolver(BaseSolver):
    """
    Iterative version of the backtracking search.

    Keeps one cursor per filled cell: the next pool slot to try there.
    Visits arrangements in the same order as BacktrackingSolver.
    """

    name = "Explicit Stack"

    def _search(self, first_slots: Sequence[int]) -> None:
        with tqdm(total=len(first_slots), desc=self.name, disable=not self.show_progress) as pbar:
            for slot in first_slots:
                self._search_subtree(slot)
                pbar.update(1)

    def _search_subtree(self, first_slot: int) -> None:
        """Visit every arrangement whose first cell comes from first_slot."""
        pool_size = len(self.ingredients)

        # Slots currently placed, one per filled cell
        chosen: List[int] = []
        self._place(0, first_slot, chosen)

        # cursors[k] is the next pool slot to try in cell k + 1
        cursors = [0]
        try:
            while cursors:
                position = len(cursors)
                i = cursors[-1]
                while i < pool_size and self.used[i]:
                    i += 1

                if i == pool_size:
                    # Cell exhausted, undo the placement that led here
                    cursors.pop()
                    self._unplace(chosen)
                    continue

                cursors[-1] = i + 1
                self._place(position, i, chosen)

                if position + 1 == PASTEL_SIZE:
                    self._check_pastel()
                    self._unplace(chosen)
                else:
                    cursors.append(0)
        finally:
            for slot in chosen:
                self.used[slot] = False

    def _place(self, position: int, slot: int, chosen: List[int]) -> None:
        self.pastel[position] = self.ingredients[slot]
        self.used[slot] = True
        chosen.append(slot)
        self.stats.nodes_explored += 1

    def _unplace(self, chosen: List[int]) -> None:
        self.used[chosen.pop()] = False
        self.stats.backtracks += 1

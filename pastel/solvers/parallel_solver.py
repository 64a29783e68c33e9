"""Process-parallel search that splits the tree by its first cell."""

from __future__ import annotations
import os
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Iterable, Optional, Sequence, Set, Tuple, Type

from tqdm import tqdm

from .base_solver import BaseSolver, SearchStats
from .backtracking_solver import BacktrackingSolver
from ..core.ingredients import SOURCE_INGREDIENTS


def search_subtree(
    solver_cls: Type[BaseSolver],
    ingredients: Sequence[int],
    first_slot: int,
    track_memory: bool = False,
) -> Tuple[Set[int], SearchStats]:
    """Run a private single-threaded solver over one top-level subtree."""
    solver = solver_cls(ingredients=ingredients, track_memory=track_memory)
    return solver.solve(first_slots=[first_slot])


class ParallelSolver(BaseSolver):
    """
    Runs each top-level subtree in its own worker process.

    Every worker owns its scratch pastel, markers and solution set.
    Signatures depend only on pastel content, so the partial solution sets
    are merged by plain union. With memory tracking on, the reported peak
    is the largest of the workers' peaks and the parent's own.
    """

    name = "Parallel"

    def __init__(
        self,
        ingredients: Iterable[int] = SOURCE_INGREDIENTS,
        show_progress: bool = False,
        track_memory: bool = False,
        workers: Optional[int] = None,
        solver_cls: Type[BaseSolver] = BacktrackingSolver,
    ):
        """
        Initialize the parallel solver.

        Args:
            workers: Number of worker processes (default: one per CPU).
            solver_cls: Single-threaded solver each worker runs.
        """
        if workers is not None and workers < 1:
            raise ValueError(f"Need at least one worker, got {workers}")
        if issubclass(solver_cls, ParallelSolver):
            raise ValueError("Workers must run a single-threaded solver")

        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        self.solver_cls = solver_cls
        self.name = f"Parallel {solver_cls.name}"
        super().__init__(ingredients, show_progress, track_memory)

    def _search(self, first_slots: Sequence[int]) -> None:
        with ProcessPoolExecutor(max_workers=self.workers) as executor:
            futures = [
                executor.submit(
                    search_subtree, self.solver_cls, self.ingredients, slot, self.track_memory
                )
                for slot in first_slots
            ]
            for future in tqdm(
                as_completed(futures),
                total=len(futures),
                desc=self.name,
                disable=not self.show_progress,
            ):
                solutions, stats = future.result()
                self.solutions |= solutions
                self.stats.merge(stats)

        self.stats.extra["workers"] = self.workers
        self.stats.extra["subtrees"] = len(first_slots)

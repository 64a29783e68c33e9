"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from typing import Optional, Dict, Any, Iterable, Sequence, Set, Tuple
import time
import tracemalloc

from ..core.ingredients import PASTEL_SIZE, SOURCE_INGREDIENTS, validate_ingredients
from ..core.validator import is_rich_pastel, pastel_signature


@dataclass
class SearchStats:
    """Statistics from a search run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0

    # Search metrics
    placements: int = 0
    rich_arrangements: int = 0
    distinct: int = 0
    nodes_explored: int = 0
    backtracks: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    # Counters summed when partial searches are merged
    COUNTERS = ("placements", "rich_arrangements", "nodes_explored", "backtracks")

    def merge(self, other: SearchStats) -> None:
        """Add the counters of another (partial) search to this one."""
        for name in self.COUNTERS:
            setattr(self, name, getattr(self, name) + getattr(other, name))
        self.memory_bytes = max(self.memory_bytes, other.memory_bytes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extra"}
        data.update(self.extra)
        return data


class BaseSolver(ABC):
    """
    Abstract base class for rich pastel searches.

    A solver owns the scratch pastel, the usage markers over the
    ingredient pool and the set of signatures of the rich pastels found.
    """

    name: str = "BaseSolver"

    def __init__(
        self,
        ingredients: Iterable[int] = SOURCE_INGREDIENTS,
        show_progress: bool = False,
        track_memory: bool = False,
    ):
        """
        Initialize the solver.

        Args:
            ingredients: Pool of ingredient tokens to draw the pastel from.
            show_progress: If True, show a progress bar over the top-level
                           subtrees of the search.
            track_memory: If True, record peak memory with tracemalloc.
                          This slows the search down considerably.
        """
        self.ingredients = validate_ingredients(ingredients)
        self.show_progress = show_progress
        self.track_memory = track_memory
        self.reset()

    def reset(self) -> None:
        """Clear the scratch state, the solutions and the statistics."""
        self.pastel = [0] * PASTEL_SIZE
        self.used = [False] * len(self.ingredients)
        self.solutions: Set[int] = set()
        self.stats = SearchStats(algorithm=self.name)

    @property
    def solution_count(self) -> int:
        """Number of distinct rich pastels found so far."""
        return len(self.solutions)

    def solve(self, first_slots: Optional[Sequence[int]] = None) -> Tuple[Set[int], SearchStats]:
        """
        Run the search to exhaustion with timing and memory tracking.

        Args:
            first_slots: Pool slots allowed in the first pastel cell. None
                         searches the whole tree; a subset searches only
                         those subtrees.

        Returns:
            Tuple of (signatures of the distinct rich pastels, stats).
        """
        self.reset()
        if first_slots is None:
            first_slots = range(len(self.ingredients))

        # Leave a tracer started by the caller running
        owns_tracer = self.track_memory and not tracemalloc.is_tracing()
        if owns_tracer:
            tracemalloc.start()

        start_time = time.perf_counter()
        try:
            self._search(list(first_slots))
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if self.track_memory:
                current, peak = tracemalloc.get_traced_memory()
                if owns_tracer:
                    tracemalloc.stop()
                # Peaks merged in from worker processes may be larger
                self.stats.memory_bytes = max(self.stats.memory_bytes, peak)

        self.stats.distinct = len(self.solutions)
        self.stats.solved = True
        return self.solutions, self.stats

    def is_clean(self) -> bool:
        """Check that every usage marker was released."""
        return not any(self.used)

    def record(self, slots: Sequence[int]) -> bool:
        """
        Fill the pastel from the given pool slots and record it if rich.

        Args:
            slots: Nine distinct pool slot indices in cell order.

        Returns:
            True if the pastel is rich.
        """
        if len(slots) != PASTEL_SIZE or len(set(slots)) != PASTEL_SIZE:
            raise ValueError(f"Need {PASTEL_SIZE} distinct pool slots, got {list(slots)}")
        for position, slot in enumerate(slots):
            self.pastel[position] = self.ingredients[slot]
        return self._check_pastel()

    def _check_pastel(self) -> bool:
        """Check the complete scratch pastel and add its signature if rich."""
        self.stats.placements += 1
        if not is_rich_pastel(self.pastel):
            return False

        self.stats.rich_arrangements += 1
        # Duplicate pastels share a signature, so the set keeps only one
        self.solutions.add(pastel_signature(self.pastel))
        return True

    @abstractmethod
    def _search(self, first_slots: Sequence[int]) -> None:
        """
        Internal search method to be implemented by subclasses.

        Must visit every arrangement whose first cell comes from
        first_slots and leave every usage marker released.
        """
        pass

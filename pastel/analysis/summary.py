"""Breakdowns of a finished set of rich pastels."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence

import numpy as np

from ..core.board import SIGNATURE_WEIGHTS
from ..core.ingredients import Ingredient, LINE_SIZE, SOURCE_INGREDIENTS
from ..core.validator import COL_LINES, MASITA, ROW_LINES

LINE_NAMES: List[str] = (
    [f"row {row}" for row in range(LINE_SIZE)] +
    [f"col {col}" for col in range(LINE_SIZE)]
)


@dataclass
class SolutionSummary:
    """Counts describing a set of distinct rich pastels."""
    total: int = 0
    by_leftover: Dict[str, int] = field(default_factory=dict)
    by_rich_line_count: Dict[int, int] = field(default_factory=dict)
    by_line: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert summary to dictionary."""
        return {
            "total": self.total,
            "by_leftover": dict(self.by_leftover),
            "by_rich_line_count": dict(self.by_rich_line_count),
            "by_line": dict(self.by_line),
        }


def decode_signatures(signatures: Iterable[int]) -> np.ndarray:
    """
    Turn pastel signatures back into an (N, 9) array of tokens.

    Rows come out sorted by signature so the result is deterministic.
    """
    ordered = sorted(signatures)
    sigs = np.array(ordered, dtype=np.int64).reshape(-1, 1)
    return (sigs // SIGNATURE_WEIGHTS) % 10


def rich_line_mask(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    """Vectorized richness check for many lines at once."""
    same = (a == b) & (a == c)

    # Only the first masita in line order decides which pair is compared
    masita_a = a == MASITA
    masita_b = ~masita_a & (b == MASITA)
    masita_c = ~masita_a & ~masita_b & (c == MASITA)

    return (
        same
        | (masita_a & (b == c))
        | (masita_b & (a == c))
        | (masita_c & (a == b))
    )


def line_masks(pastels: np.ndarray) -> np.ndarray:
    """Richness of every line of every pastel, as an (N, 6) boolean array."""
    columns = [
        rich_line_mask(pastels[:, i], pastels[:, j], pastels[:, k])
        for i, j, k in ROW_LINES + COL_LINES
    ]
    return np.stack(columns, axis=1)


def summarize(
    signatures: Iterable[int],
    ingredients: Sequence[int] = SOURCE_INGREDIENTS,
) -> SolutionSummary:
    """
    Break a set of rich pastel signatures down for reporting.

    Args:
        signatures: Signatures of distinct rich pastels.
        ingredients: Pool the pastels were drawn from.

    Returns:
        A SolutionSummary with counts by leftover ingredient, by number of
        rich lines, and by rich line position.
    """
    pastels = decode_signatures(signatures)
    if pastels.size and (pastels.min() < Ingredient.DULCE or pastels.max() > Ingredient.MASITA):
        raise ValueError("Signatures must encode pastels of ingredient tokens")

    pool = np.array(ingredients, dtype=np.int64)
    leftover: Dict[str, int] = {}
    for ingredient in Ingredient:
        available = int(np.sum(pool == ingredient))
        missing = available - np.sum(pastels == ingredient, axis=1)
        if np.any(missing < 0):
            raise ValueError(f"Pastel uses more {ingredient.name.lower()} than the pool holds")
        leftover[ingredient.name.lower()] = int(missing.sum())

    masks = line_masks(pastels)
    line_counts = masks.sum(axis=1)
    by_count = {
        n: int(np.sum(line_counts == n))
        for n in range(1, 2 * LINE_SIZE + 1)
    }
    by_line = {
        name: int(masks[:, idx].sum())
        for idx, name in enumerate(LINE_NAMES)
    }

    return SolutionSummary(
        total=len(pastels),
        by_leftover=leftover,
        by_rich_line_count=by_count,
        by_line=by_line,
    )

"""Pastel board representation."""

from __future__ import annotations
import numpy as np
from typing import List, Optional, Sequence, Tuple

from .ingredients import Ingredient, LINE_SIZE, PASTEL_SIZE, SOURCE_INGREDIENTS
from .validator import is_rich_pastel, pastel_signature, rich_lines

# Digit weights of the pastel signature, one per cell in row-major order
SIGNATURE_WEIGHTS = 10 ** np.arange(PASTEL_SIZE, dtype=np.int64)


class PastelBoard:
    """
    A complete 3x3 pastel.

    Cells hold ingredient tokens (1-4) in a numpy array. The search itself
    works on flat lists for speed; boards are used to inspect, print and
    analyze the pastels it finds.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a pastel board.

        Args:
            grid: A 3x3 array of ingredient tokens. If None, the board is
                  filled with dulces.
        """
        if grid is None:
            grid = np.full((LINE_SIZE, LINE_SIZE), Ingredient.DULCE, dtype=np.int32)

        grid = np.asarray(grid)
        if grid.shape != (LINE_SIZE, LINE_SIZE):
            raise ValueError(f"Grid shape must be ({LINE_SIZE}, {LINE_SIZE}), got {grid.shape}")
        if grid.min() < Ingredient.DULCE or grid.max() > Ingredient.MASITA:
            raise ValueError(f"Ingredients must be 1-{len(Ingredient)}")

        self.grid = grid.astype(np.int32)

    def copy(self) -> PastelBoard:
        """Create a deep copy of the board."""
        return PastelBoard(self.grid.copy())

    def get(self, row: int, col: int) -> Ingredient:
        """Get the ingredient at position (row, col)."""
        return Ingredient(int(self.grid[row, col]))

    def get_row(self, row: int) -> np.ndarray:
        """Get all tokens in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all tokens in a column."""
        return self.grid[:, col]

    def to_sequence(self) -> List[int]:
        """Flatten the board to nine tokens in row-major order."""
        return [int(token) for token in self.grid.flatten()]

    def transpose(self) -> PastelBoard:
        """Swap rows and columns."""
        return PastelBoard(self.grid.T.copy())

    def signature(self) -> int:
        """Compute the base-10 signature used to deduplicate pastels."""
        return int(np.dot(self.grid.flatten().astype(np.int64), SIGNATURE_WEIGHTS))

    def is_rich(self) -> bool:
        """Check if at least one row or column is rich."""
        return is_rich_pastel(self.to_sequence())

    def rich_lines(self) -> List[Tuple[str, int]]:
        """List the rich rows and columns of the board."""
        return rich_lines(self.to_sequence())

    def leftover(self, ingredients: Sequence[int] = SOURCE_INGREDIENTS) -> List[Ingredient]:
        """
        Find which ingredients of the pool were not placed on the board.

        Raises:
            ValueError: If the board uses an ingredient more often than
                the pool holds it.
        """
        remaining = []
        for ingredient in Ingredient:
            available = sum(1 for token in ingredients if token == ingredient)
            placed = int(np.sum(self.grid == ingredient))
            if placed > available:
                raise ValueError(
                    f"Board holds {placed} {ingredient.name.lower()} but the pool has {available}"
                )
            remaining.extend([ingredient] * (available - placed))
        return remaining

    def to_string(self) -> str:
        """Convert board to nine digits, one per cell."""
        return ''.join(str(token) for token in self.to_sequence())

    @classmethod
    def from_sequence(cls, tokens: Sequence[int]) -> PastelBoard:
        """Create a board from nine tokens in row-major order."""
        if len(tokens) != PASTEL_SIZE:
            raise ValueError(f"Need {PASTEL_SIZE} tokens, got {len(tokens)}")
        return cls(np.array(tokens, dtype=np.int32).reshape(LINE_SIZE, LINE_SIZE))

    @classmethod
    def from_string(cls, s: str) -> PastelBoard:
        """
        Create a board from a string representation.

        Args:
            s: Nine characters, either digits 1-4 or ingredient symbols
               (D, F, C, M).
        """
        if len(s) != PASTEL_SIZE:
            raise ValueError(f"String length must be {PASTEL_SIZE}, got {len(s)}")

        tokens = []
        for c in s:
            if c.isdigit():
                tokens.append(int(c))
            else:
                tokens.append(int(Ingredient.from_symbol(c)))
        return cls.from_sequence(tokens)

    @classmethod
    def from_signature(cls, signature: int) -> PastelBoard:
        """Rebuild the board a signature was computed from."""
        if signature < 0:
            raise ValueError(f"Signature must be non-negative, got {signature}")
        if signature // (10 ** PASTEL_SIZE):
            raise ValueError(f"Signature has more than {PASTEL_SIZE} digits: {signature}")
        digits = (signature // SIGNATURE_WEIGHTS) % 10
        return cls(digits.reshape(LINE_SIZE, LINE_SIZE))

    def __str__(self) -> str:
        """Pretty-print the board with ingredient symbols."""
        horizontal_sep = '+' + '-' * (LINE_SIZE * 2 + 1) + '+'
        lines = [horizontal_sep]
        for row in range(LINE_SIZE):
            symbols = ' '.join(self.get(row, col).symbol for col in range(LINE_SIZE))
            lines.append(f'| {symbols} |')
        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"PastelBoard('{self.to_string()}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PastelBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())

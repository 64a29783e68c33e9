"""Ingredient tokens and the fixed ingredient pool of a pastel."""

from __future__ import annotations
from enum import IntEnum
from typing import Iterable, Tuple


class Ingredient(IntEnum):
    """Ingredient tokens placed in a pastel."""
    DULCE = 1
    FRUTA = 2
    CONFITE = 3
    MASITA = 4

    @property
    def symbol(self) -> str:
        """Single-letter symbol used when printing a pastel."""
        return self.name[0]

    @classmethod
    def from_symbol(cls, symbol: str) -> Ingredient:
        """Look up an ingredient by its single-letter symbol."""
        for ingredient in cls:
            if ingredient.symbol == symbol.upper():
                return ingredient
        raise ValueError(f"Unknown ingredient symbol: {symbol!r}")


# Pastel geometry
LINE_SIZE = 3
PASTEL_SIZE = LINE_SIZE * LINE_SIZE

# Three of each common ingredient and a single masita
SOURCE_INGREDIENTS: Tuple[int, ...] = (
    Ingredient.DULCE, Ingredient.DULCE, Ingredient.DULCE,
    Ingredient.FRUTA, Ingredient.FRUTA, Ingredient.FRUTA,
    Ingredient.CONFITE, Ingredient.CONFITE, Ingredient.CONFITE,
    Ingredient.MASITA,
)


def validate_ingredients(ingredients: Iterable[int]) -> Tuple[int, ...]:
    """
    Check an ingredient pool and return it as a tuple of plain ints.

    Raises:
        ValueError: If a token is not an ingredient or the pool cannot
            fill a pastel.
    """
    pool = tuple(int(token) for token in ingredients)
    valid = {int(ingredient) for ingredient in Ingredient}
    for token in pool:
        if token not in valid:
            raise ValueError(f"Ingredient must be 1-{len(Ingredient)}, got {token}")
    if len(pool) < PASTEL_SIZE:
        raise ValueError(
            f"Need at least {PASTEL_SIZE} ingredients to fill a pastel, got {len(pool)}"
        )
    return pool

"""Core module for pastel representation and richness rules."""

from .ingredients import Ingredient, SOURCE_INGREDIENTS, PASTEL_SIZE, LINE_SIZE
from .board import PastelBoard
from .validator import is_rich_line, is_rich_pastel, pastel_signature, rich_lines

__all__ = [
    "Ingredient",
    "SOURCE_INGREDIENTS",
    "PASTEL_SIZE",
    "LINE_SIZE",
    "PastelBoard",
    "is_rich_line",
    "is_rich_pastel",
    "pastel_signature",
    "rich_lines",
]

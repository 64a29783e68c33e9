"""Exhaustive search for rich pastels."""

from .core import Ingredient, PastelBoard, SOURCE_INGREDIENTS
from .solvers import BacktrackingSolver, StackSolver, ParallelSolver

__version__ = "1.0.0"

__all__ = [
    "Ingredient",
    "PastelBoard",
    "SOURCE_INGREDIENTS",
    "BacktrackingSolver",
    "StackSolver",
    "ParallelSolver",
]

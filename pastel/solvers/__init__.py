"""Solvers module for rich pastel searches."""

from .base_solver import BaseSolver, SearchStats
from .backtracking_solver import BacktrackingSolver
from .stack_solver import StackSolver
from .parallel_solver import ParallelSolver

__all__ = [
    "BaseSolver",
    "SearchStats",
    "BacktrackingSolver",
    "StackSolver",
    "ParallelSolver",
]

"""Command-line interface for the rich pastel counter."""

import argparse
import os
from typing import List, Optional

from .analysis import Visualizer, summarize
from .solvers import BacktrackingSolver, ParallelSolver, StackSolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count the distinct rich pastels that fit 9 of the 10 ingredients",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the number of distinct rich pastels
  python -m pastel.cli

  # Same count with the explicit-stack search and statistics
  python -m pastel.cli --algorithm stack --verbose

  # Split the search over 4 processes and save charts
  python -m pastel.cli --algorithm parallel --workers 4 --charts results/
        """
    )
    parser.add_argument(
        "--algorithm", "-a",
        choices=["backtracking", "stack", "parallel"],
        default="backtracking",
        help="Search algorithm to use (default: backtracking)"
    )
    parser.add_argument(
        "--workers", "-w", type=int, default=None,
        help="Worker processes for the parallel search (default: one per CPU)"
    )
    parser.add_argument(
        "--progress", action="store_true",
        help="Show a progress bar on stderr"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show search statistics and a breakdown of the rich pastels"
    )
    parser.add_argument(
        "--track-memory", action="store_true",
        help="Record peak memory of the search (slow)"
    )
    parser.add_argument(
        "--charts", "-c", type=str, default=None, metavar="DIR",
        help="Directory to save breakdown charts to"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.workers is not None and args.algorithm != "parallel":
        parser.error("--workers only applies to --algorithm parallel")
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")

    options = {"show_progress": args.progress, "track_memory": args.track_memory}
    if args.algorithm == "parallel":
        solver = ParallelSolver(workers=args.workers, **options)
    elif args.algorithm == "stack":
        solver = StackSolver(**options)
    else:
        solver = BacktrackingSolver(**options)

    solutions, stats = solver.solve()

    if args.verbose or args.charts:
        summary = summarize(solutions, solver.ingredients)

    if args.verbose:
        print_report(stats, summary)

    if args.charts:
        visualizer = Visualizer(summary, args.charts)
        charts = visualizer.generate_all()
        if args.verbose:
            print(f"Charts saved to {args.charts}/")
            for chart in charts:
                print(f"  - {os.path.basename(chart)}")

    print(len(solutions))


def print_report(stats, summary) -> None:
    """Print search statistics and the solution breakdown."""
    print("=" * 50)
    print(f"Algorithm: {stats.algorithm}")
    print(f"  Time: {stats.time_seconds:.2f}s")
    if stats.memory_bytes:
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
    print(f"  Placements: {stats.placements:,}")
    print(f"  Rich arrangements: {stats.rich_arrangements:,}")
    print(f"  Nodes explored: {stats.nodes_explored:,}")
    print(f"  Backtracks: {stats.backtracks:,}")
    print("-" * 50)
    print("By leftover ingredient:")
    for name, count in summary.by_leftover.items():
        print(f"  {name.capitalize():<10} {count:>6,}")
    print("By number of rich lines:")
    for n, count in summary.by_rich_line_count.items():
        print(f"  {n:<10} {count:>6,}")
    print("By rich line:")
    for name, count in summary.by_line.items():
        print(f"  {name.capitalize():<10} {count:>6,}")
    print("=" * 50)


if __name__ == "__main__":
    main()

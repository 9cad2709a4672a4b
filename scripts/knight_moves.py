#!/usr/bin/env python3
"""
Knight Path CLI - Find the knight moves between two squares.

Usage:
    python scripts/knight_moves.py --start a1 --goal h8
    python scripts/knight_moves.py --start 0,0 --goal 3,3 --algorithm dfs
    python scripts/knight_moves.py --start a1 --goal b1 --algorithm both
    python scripts/knight_moves.py --start 0,0 --goal 1,1 --board-size 3 -v

Squares:
    Algebraic notation (a1 .. h8) or "row,column" (0-indexed).

Algorithms:
    bfs  - Breadth-first search, shortest path guaranteed
    dfs  - Depth-first search, any path
    both - Run both and compare
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from knight_path.board import BoardGraph, OutOfBoundsError, parse_square  # noqa: E402
from knight_path.config import (  # noqa: E402
    AVAILABLE_ALGORITHMS,
    BOARD_SIZE,
    DEFAULT_ALGORITHM,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find knight moves between two squares",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Starting square (e.g. a1 or 0,0)",
    )
    parser.add_argument(
        "--goal",
        type=str,
        required=True,
        help="Goal square (e.g. h8 or 7,7)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=[*AVAILABLE_ALGORITHMS, "both"],
        help=f"Search to use (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--board-size",
        type=int,
        default=BOARD_SIZE,
        help=f"Side length of the board (default: {BOARD_SIZE})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        graph = BoardGraph(args.board_size)
        start = graph.resolve(parse_square(args.start))
        goal = graph.resolve(parse_square(args.goal))
    except (ValueError, OutOfBoundsError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    algorithms = AVAILABLE_ALGORITHMS if args.algorithm == "both" else (args.algorithm,)

    print("\n" + "=" * 60)
    print("Knight Path")
    print("=" * 60)
    print(f"  Board:  {graph.board_size}x{graph.board_size}")
    print(f"  Start:  {start.to_algebraic()} {start}")
    print(f"  Goal:   {goal.to_algebraic()} {goal}")
    print("=" * 60)

    all_found = True
    for name in algorithms:
        result = graph.search(start, goal, algorithm=name)

        print(f"\n--- {name.upper()} ---")
        if not result.found:
            print(f"No path from {start} to {goal}")
            all_found = False
        else:
            for i, (row, column) in enumerate(result.path):
                print(f"  {i}. ({row}, {column})")
            print(f"Moves: {result.move_count}")
        print(f"Explored squares: {result.explored_count}")

    return 0 if all_found else 1


if __name__ == "__main__":
    sys.exit(main())

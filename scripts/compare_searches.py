#!/usr/bin/env python3
"""
Compare BFS and DFS over every (start, goal) pair on the board.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
logging.basicConfig(level=logging.WARNING)  # Quiet mode

from knight_path.benchmark import compare_searches
from knight_path.board import BoardGraph
from knight_path.config import AVAILABLE_ALGORITHMS, BOARD_SIZE


def run_benchmark(board_size: int) -> None:
    graph = BoardGraph(board_size)

    print("=" * 70)
    print("Knight Path - BFS vs DFS")
    print("=" * 70)
    print(f"\nSearching all {len(graph) ** 2} pairs on a {board_size}x{board_size} board...\n")

    start_time = time.time()
    summaries = compare_searches(graph, AVAILABLE_ALGORITHMS)
    elapsed = time.time() - start_time

    print(f"{'Algorithm':<10} {'Found':>11} {'Mean moves':>11} {'Max':>5} "
          f"{'Explored':>9} {'Optimal':>8}")
    print("-" * 70)
    for s in summaries:
        print(f"{s.algorithm:<10} {s.found:>5}/{s.pairs:<5} {s.mean_moves:>11.2f} "
              f"{s.max_moves:>5} {s.mean_explored:>9.1f} {s.optimal_fraction:>8.0%}")

    print(f"\nDone in {elapsed:.2f}s")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--board-size",
        type=int,
        default=BOARD_SIZE,
        help=f"Side length of the board (default: {BOARD_SIZE})",
    )
    args = parser.parse_args()

    run_benchmark(args.board_size)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Benchmark module.

Provides all-pairs comparison of the searches:
- distance_matrix: Reference knight distances (numpy)
- compare_searches: Runs each search over every pair
- SearchSummary: Aggregate per-algorithm statistics
"""

from knight_path.benchmark.metrics import (
    UNREACHABLE,
    SearchSummary,
    adjacency_matrix,
    compare_searches,
    distance_matrix,
    square_index,
)

__all__ = [
    "UNREACHABLE",
    "SearchSummary",
    "adjacency_matrix",
    "compare_searches",
    "distance_matrix",
    "square_index",
]

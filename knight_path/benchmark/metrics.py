"""
All-pairs metrics for comparing knight-path searches.

distance_matrix() computes true knight distances with numpy frontier
expansion over an adjacency matrix. It shares no code with the search
classes, so it can be used as a reference to check them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from knight_path.board.graph import BoardGraph
from knight_path.search import get_search

logger = logging.getLogger(__name__)

# Marks pairs that cannot reach each other
UNREACHABLE = -1


def square_index(graph: BoardGraph, row: int, column: int) -> int:
    """Row-major index of (row, column) in the matrices below."""
    return row * graph.board_size + column


def adjacency_matrix(graph: BoardGraph) -> np.ndarray:
    """Boolean n x n matrix, True where a knight move joins two squares."""
    n = len(graph)
    adjacency = np.zeros((n, n), dtype=bool)
    for square in graph:
        i = square_index(graph, square.row, square.column)
        for neighbor in graph.neighbors_of(square):
            adjacency[i, square_index(graph, neighbor.row, neighbor.column)] = True
    return adjacency


def distance_matrix(graph: BoardGraph) -> np.ndarray:
    """
    Knight distance between every pair of squares.

    Expands all sources at once: row i of `frontier` holds the squares
    first reached from square i at the current depth.

    Returns:
        n x n int array (n = board_size ** 2), UNREACHABLE where no path exists
    """
    adjacency = adjacency_matrix(graph).astype(np.int64)
    n = adjacency.shape[0]

    distances = np.full((n, n), UNREACHABLE, dtype=np.int64)
    np.fill_diagonal(distances, 0)

    reached = np.eye(n, dtype=bool)
    frontier = np.eye(n, dtype=bool)
    depth = 0

    while frontier.any():
        depth += 1
        frontier = ((frontier.astype(np.int64) @ adjacency) > 0) & ~reached
        distances[frontier] = depth
        reached |= frontier

    logger.debug(f"Distance matrix for {n} squares, eccentricity {distances.max()}")
    return distances


@dataclass
class SearchSummary:
    """
    Aggregate results of one algorithm over every ordered pair.

    Attributes:
        algorithm: Search name
        pairs: Number of (start, goal) pairs tried
        found: Pairs where a path was returned
        mean_moves: Mean path length in moves (found pairs only)
        max_moves: Longest path returned
        mean_explored: Mean squares explored per search
        optimal_fraction: Share of found paths that match the true distance
    """

    algorithm: str
    pairs: int
    found: int
    mean_moves: float
    max_moves: int
    mean_explored: float
    optimal_fraction: float


def compare_searches(
    graph: BoardGraph,
    algorithms: Iterable[str] = ("bfs", "dfs"),
) -> list[SearchSummary]:
    """
    Run each algorithm over every ordered (start, goal) pair.

    Args:
        graph: Board to search
        algorithms: Search names accepted by get_search

    Returns:
        One SearchSummary per algorithm, in the order given
    """
    distances = distance_matrix(graph)
    squares = list(graph)
    summaries = []

    for name in algorithms:
        search = get_search(name, graph)
        moves = []
        optimal = []
        explored = np.zeros(len(squares) ** 2, dtype=np.int64)

        for i, start in enumerate(squares):
            for j, goal in enumerate(squares):
                result = search.search(start, goal)
                explored[i * len(squares) + j] = result.explored_count
                if result.found:
                    moves.append(result.move_count)
                    optimal.append(result.move_count == distances[i, j])

        moves_arr = np.asarray(moves, dtype=np.int64)
        summary = SearchSummary(
            algorithm=search.name,
            pairs=len(explored),
            found=len(moves),
            mean_moves=float(moves_arr.mean()) if moves else 0.0,
            max_moves=int(moves_arr.max()) if moves else 0,
            mean_explored=float(explored.mean()),
            optimal_fraction=float(np.mean(optimal)) if optimal else 0.0,
        )
        logger.info(
            f"{summary.algorithm}: {summary.found}/{summary.pairs} found, "
            f"mean {summary.mean_moves:.2f} moves, "
            f"{summary.optimal_fraction:.0%} optimal"
        )
        summaries.append(summary)

    return summaries

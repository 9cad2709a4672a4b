"""
Search module.

Provides path searches over the knight-move graph:
- BreadthFirstSearch: Shortest path (FIFO frontier)
- DepthFirstSearch: Some path (LIFO frontier)
- SearchResult: Path plus explored-square count
- reconstruct_path: Predecessor walk from goal back to start
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from knight_path.search.base import PathSearch, SearchResult
from knight_path.search.bfs import BreadthFirstSearch
from knight_path.search.dfs import DepthFirstSearch
from knight_path.search.path import reconstruct_path

if TYPE_CHECKING:
    from knight_path.board.graph import BoardGraph

__all__ = [
    "PathSearch",
    "SearchResult",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "reconstruct_path",
    "get_search",
]


def get_search(name: str, graph: BoardGraph) -> PathSearch:
    """
    Get a search by name.

    Args:
        name: Search identifier (bfs, dfs)
        graph: Board graph the search runs over

    Returns:
        Instantiated search bound to graph

    Raises:
        ValueError: If search name is unknown
    """
    searches = {
        "bfs": BreadthFirstSearch,
        "dfs": DepthFirstSearch,
    }

    key = name.lower()
    if key not in searches:
        available = ", ".join(searches.keys())
        raise ValueError(f"Unknown search '{name}'. Available: {available}")

    return searches[key](graph)

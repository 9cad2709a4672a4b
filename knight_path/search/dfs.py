"""
Depth-first search: returns some path, not necessarily the shortest.
"""

from __future__ import annotations

from collections import deque

from knight_path.board.square import Square
from knight_path.search.base import PathSearch


class DepthFirstSearch(PathSearch):
    """
    LIFO frontier search.

    The neighbor pushed last is explored first, so the path shape is set
    entirely by neighbor order. No optimality guarantee.
    """

    @property
    def name(self) -> str:
        return "dfs"

    @property
    def description(self) -> str:
        return "Depth-first search (any path, not necessarily shortest)"

    def _take(self, frontier: deque[Square]) -> Square:
        return frontier.pop()

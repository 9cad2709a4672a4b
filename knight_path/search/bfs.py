"""
Breadth-first search: always returns a shortest path.
"""

from __future__ import annotations

from collections import deque

from knight_path.board.square import Square
from knight_path.search.base import PathSearch


class BreadthFirstSearch(PathSearch):
    """
    FIFO frontier search.

    Squares are explored in non-decreasing distance from the start, so the
    first time the goal leaves the frontier it was reached by a fewest-moves
    path. Among equally short paths, neighbor order decides.
    """

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Breadth-first search (shortest path guaranteed)"

    def _take(self, frontier: deque[Square]) -> Square:
        return frontier.popleft()

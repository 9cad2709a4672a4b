"""
Search base class and result record for knight-path searches.

All searches share one loop: take a square off the frontier, mark it
explored, stop if it is the goal, otherwise push its undiscovered
neighbors. Subclasses only decide which end of the frontier to take from.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from knight_path.search.path import reconstruct_path

if TYPE_CHECKING:
    from knight_path.board.graph import BoardGraph
    from knight_path.board.square import Square, SquareLike

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """
    Outcome of a single search.

    Attributes:
        algorithm: Name of the search that produced this result
        start: Starting coordinate
        goal: Goal coordinate
        path: Coordinates from start to goal, or None if goal was not reached
        explored_count: Squares removed from the frontier (including the goal)
    """

    algorithm: str
    start: tuple[int, int]
    goal: tuple[int, int]
    path: list[tuple[int, int]] | None
    explored_count: int

    @property
    def found(self) -> bool:
        """Whether the goal was reached."""
        return self.path is not None

    @property
    def move_count(self) -> int | None:
        """Number of knight moves on the path (len(path) - 1)."""
        if self.path is None:
            return None
        return len(self.path) - 1


class PathSearch(ABC):
    """
    Abstract base class for frontier-based searches over a BoardGraph.

    Every call to search() allocates its own frontier, explored set and
    predecessor map, so the graph is never mutated and successive searches
    are independent.
    """

    def __init__(self, graph: BoardGraph) -> None:
        self._graph = graph

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the search (e.g., 'bfs')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the search strategy."""
        ...

    @abstractmethod
    def _take(self, frontier: deque[Square]) -> Square:
        """Remove and return the next square to explore."""
        ...

    def search(self, start: SquareLike, goal: SquareLike) -> SearchResult:
        """
        Find a path of knight moves from start to goal.

        Args:
            start: Starting square or (row, column)
            goal: Goal square or (row, column)

        Returns:
            SearchResult; its path is None if the frontier empties first

        Raises:
            OutOfBoundsError: If start or goal is off the board
        """
        start_square = self._graph.resolve(start)
        goal_square = self._graph.resolve(goal)

        frontier: deque[Square] = deque([start_square])
        in_frontier: set[Square] = {start_square}
        explored: set[Square] = set()
        predecessors: dict[Square, Square] = {}

        while frontier:
            square = self._take(frontier)
            in_frontier.discard(square)
            explored.add(square)

            if square == goal_square:
                path = reconstruct_path(predecessors, square, start_square)
                logger.debug(f"{self.name}: explored {len(explored)} squares")
                logger.info(
                    f"{self.name} found path ({len(path) - 1} moves): "
                    f"{' -> '.join(str(c) for c in path)}"
                )
                return self._result(start_square, goal_square, path, len(explored))

            for neighbor in self._graph.neighbors_of(square):
                if neighbor in in_frontier or neighbor in explored:
                    continue
                predecessors[neighbor] = square
                in_frontier.add(neighbor)
                frontier.append(neighbor)

        logger.warning(
            f"{self.name}: no path from {start_square} to {goal_square} "
            f"after exploring {len(explored)} squares"
        )
        return self._result(start_square, goal_square, None, len(explored))

    def _result(
        self,
        start: Square,
        goal: Square,
        path: list[tuple[int, int]] | None,
        explored_count: int,
    ) -> SearchResult:
        return SearchResult(
            algorithm=self.name,
            start=start.coordinate,
            goal=goal.coordinate,
            path=path,
            explored_count=explored_count,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"

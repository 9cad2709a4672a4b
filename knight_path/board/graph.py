"""
Knight-move graph over a square chessboard.

Vertices are squares, edges are legal knight moves. The graph is built
once at construction and never resized.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from knight_path.board.square import Square, SquareLike, as_coordinate
from knight_path.config import BOARD_SIZE, DEFAULT_ALGORITHM

if TYPE_CHECKING:
    from knight_path.search.base import SearchResult

logger = logging.getLogger(__name__)


class OutOfBoundsError(IndexError):
    """A coordinate lies outside [0, board_size) on either axis."""

    def __init__(self, coordinate: tuple[int, int], board_size: int) -> None:
        self.coordinate = coordinate
        self.board_size = board_size
        super().__init__(
            f"Square {coordinate} is outside the {board_size}x{board_size} board"
        )


class BoardGraph:
    """
    Undirected graph of knight moves on a board_size x board_size board.

    Neighbor lists follow KNIGHT_OFFSETS order, which fixes the exploration
    order of every search and therefore which of several equally short
    paths is returned.

    Attributes:
        board_size: Side length of the board
    """

    # Clockwise, starting from two rows up and one column right
    KNIGHT_OFFSETS = (
        (-2, 1),
        (-1, 2),
        (1, 2),
        (2, 1),
        (2, -1),
        (1, -2),
        (-1, -2),
        (-2, -1),
    )

    def __init__(self, board_size: int = BOARD_SIZE) -> None:
        """
        Build the board and connect every knight move.

        Args:
            board_size: Side length of the board (must be positive)

        Raises:
            ValueError: If board_size is not positive
        """
        if board_size <= 0:
            raise ValueError(f"Board size must be positive, got {board_size}")

        self.board_size = board_size
        self._board: list[list[Square]] = []
        self._adjacency: dict[Square, list[Square]] = {}
        self._edges: set[frozenset[Square]] = set()

        self._create_squares()
        self._connect_all_adjacents()

        logger.debug(
            f"Built {board_size}x{board_size} knight graph: "
            f"{len(self)} squares, {self.edge_count} edges"
        )

    def _create_squares(self) -> None:
        """Create one Square per board cell."""
        for row in range(self.board_size):
            self._board.append(
                [Square(row, column) for column in range(self.board_size)]
            )

    def _on_board(self, row: int, column: int) -> bool:
        return 0 <= row < self.board_size and 0 <= column < self.board_size

    def _find_adjacents(self, square: Square) -> list[Square]:
        """Squares one knight move away, in KNIGHT_OFFSETS order."""
        adjacents = []
        for d_row, d_column in self.KNIGHT_OFFSETS:
            row, column = square.row + d_row, square.column + d_column
            if self._on_board(row, column):
                adjacents.append(self._board[row][column])
        return adjacents

    def _connect_adjacents(self, square: Square) -> None:
        """Link square to each of its adjacents, skipping existing edges."""
        adjacents = self._find_adjacents(square)
        self._adjacency[square] = adjacents

        for adjacent in adjacents:
            if not self.edge_exists(square, adjacent):
                self._edges.add(frozenset((square, adjacent)))

    def _connect_all_adjacents(self) -> None:
        for row in self._board:
            for square in row:
                self._connect_adjacents(square)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def square(self, row: int, column: int) -> Square:
        """
        Get the square at (row, column).

        Raises:
            OutOfBoundsError: If the coordinate is off the board
        """
        if not self._on_board(row, column):
            raise OutOfBoundsError((row, column), self.board_size)
        return self._board[row][column]

    def resolve(self, square: SquareLike) -> Square:
        """Validate a Square or (row, column) pair and return the board's Square."""
        row, column = as_coordinate(square)
        return self.square(row, column)

    def neighbors_of(self, square: SquareLike) -> list[Square]:
        """Squares reachable by one knight move, in KNIGHT_OFFSETS order."""
        return list(self._adjacency[self.resolve(square)])

    def edge_exists(self, a: Square, b: Square) -> bool:
        return frozenset((a, b)) in self._edges

    @property
    def edge_count(self) -> int:
        """Number of undirected edges."""
        return len(self._edges)

    def __len__(self) -> int:
        return self.board_size * self.board_size

    def __iter__(self) -> Iterator[Square]:
        for row in self._board:
            yield from row

    def __contains__(self, square: object) -> bool:
        try:
            row, column = as_coordinate(square)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        return self._on_board(row, column)

    # -------------------------------------------------------------------------
    # Search entry points
    # -------------------------------------------------------------------------

    def search(
        self,
        start: SquareLike,
        goal: SquareLike,
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> SearchResult:
        """
        Run the named search algorithm from start to goal.

        Args:
            start: Starting square or (row, column)
            goal: Goal square or (row, column)
            algorithm: "bfs" or "dfs"

        Returns:
            SearchResult with the path (None if unreachable) and explored count
        """
        from knight_path.search import get_search

        return get_search(algorithm, self).search(start, goal)

    def knight_moves_bfs(
        self, start: SquareLike, goal: SquareLike
    ) -> list[tuple[int, int]] | None:
        """Shortest list of (row, column) coordinates from start to goal."""
        return self.search(start, goal, algorithm="bfs").path

    def knight_moves_dfs(
        self, start: SquareLike, goal: SquareLike
    ) -> list[tuple[int, int]] | None:
        """Some list of (row, column) coordinates from start to goal."""
        return self.search(start, goal, algorithm="dfs").path

    def __repr__(self) -> str:
        return f"BoardGraph(board_size={self.board_size})"

"""
Square value type for the knight-move graph.

Squares are identified by their (row, column) coordinate and compare by
value, so fresh search structures (sets, dicts) agree on membership.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# Displacements a knight can make, as unordered magnitudes
KNIGHT_DELTAS = frozenset({(1, 2), (2, 1)})


@dataclass(frozen=True, order=True)
class Square:
    """
    One cell of the board.

    Attributes:
        row: 0-indexed row
        column: 0-indexed column
    """

    row: int
    column: int

    @property
    def coordinate(self) -> tuple[int, int]:
        """The (row, column) pair."""
        return (self.row, self.column)

    @classmethod
    def from_algebraic(cls, text: str) -> Square:
        """
        Parse chess notation such as "a1" or "h8".

        The file letter selects the column and the rank number the row,
        so "a1" is (0, 0).

        Raises:
            ValueError: If text is not a letter followed by a positive rank
        """
        text = text.strip().lower()
        if len(text) < 2 or not text[0].isalpha() or not text[1:].isdigit():
            raise ValueError(f"Invalid square '{text}', expected e.g. 'a1'")

        rank = int(text[1:])
        if rank < 1:
            raise ValueError(f"Invalid rank in '{text}', ranks start at 1")

        return cls(row=rank - 1, column=ord(text[0]) - ord("a"))

    def to_algebraic(self) -> str:
        """Chess notation for this square ("a1" for (0, 0))."""
        return f"{chr(ord('a') + self.column)}{self.row + 1}"

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


SquareLike = Union[Square, tuple[int, int]]


def as_coordinate(square: SquareLike) -> tuple[int, int]:
    """Normalize a Square or (row, column) pair to a plain tuple."""
    if isinstance(square, Square):
        return square.coordinate
    row, column = square
    return (int(row), int(column))


def parse_square(text: str) -> Square:
    """
    Parse "row,column" (e.g. "0,0") or algebraic notation (e.g. "a1").

    Raises:
        ValueError: If text matches neither form
    """
    if "," in text:
        parts = [part.strip() for part in text.split(",")]
        if len(parts) != 2 or not all(p.lstrip("-").isdigit() for p in parts):
            raise ValueError(f"Invalid coordinate '{text}', expected 'row,column'")
        return Square(int(parts[0]), int(parts[1]))
    return Square.from_algebraic(text)


def is_knight_move(a: SquareLike, b: SquareLike) -> bool:
    """Whether a single knight move connects a and b."""
    row_a, col_a = as_coordinate(a)
    row_b, col_b = as_coordinate(b)
    return (abs(row_a - row_b), abs(col_a - col_b)) in KNIGHT_DELTAS

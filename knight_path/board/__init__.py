"""
Board module.

Provides the knight-move graph:
- Square: Immutable (row, column) board cell
- parse_square: "row,column" or algebraic ("a1") text to Square
- BoardGraph: Squares plus their knight-move adjacency
- OutOfBoundsError: Raised for coordinates off the board
"""

from knight_path.board.graph import BoardGraph, OutOfBoundsError
from knight_path.board.square import (
    Square,
    SquareLike,
    as_coordinate,
    is_knight_move,
    parse_square,
)

__all__ = [
    "BoardGraph",
    "OutOfBoundsError",
    "Square",
    "SquareLike",
    "as_coordinate",
    "is_knight_move",
    "parse_square",
]

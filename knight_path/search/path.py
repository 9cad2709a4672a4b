"""
Path reconstruction from predecessor links.
"""

from __future__ import annotations

from knight_path.board.square import Square


def reconstruct_path(
    predecessors: dict[Square, Square],
    goal: Square,
    start: Square,
) -> list[tuple[int, int]]:
    """
    Walk predecessor links from goal back to start.

    Args:
        predecessors: Maps each discovered square to the square that found it
        goal: Square the search stopped at
        start: Square the search began from

    Returns:
        (row, column) coordinates ordered start -> goal

    Raises:
        ValueError: If the chain from goal never reaches start
    """
    path = []
    square = goal

    while square != start:
        path.append(square.coordinate)
        if square not in predecessors or len(path) > len(predecessors):
            raise ValueError(f"Predecessor chain from {goal} never reaches {start}")
        square = predecessors[square]

    path.append(start.coordinate)
    path.reverse()
    return path

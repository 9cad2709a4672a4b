"""
Knight Path.

Finds the sequence of knight moves between two squares of a chessboard
by searching the knight-move graph with breadth-first search (shortest
path) or depth-first search (some path).
"""

__version__ = "0.1.0"

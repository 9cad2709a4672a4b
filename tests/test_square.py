"""
Unit tests for the Square value type and coordinate helpers.
"""

import pytest

from knight_path.board import Square, as_coordinate, is_knight_move, parse_square


class TestSquare:
    """Test value semantics."""

    def test_equality_by_value(self):
        """Distinct instances with the same coordinate should be equal."""
        assert Square(2, 3) == Square(2, 3)
        assert Square(2, 3) is not Square(2, 3)

    def test_hash_by_value(self):
        """Equal squares should collapse in sets and share dict keys."""
        assert len({Square(1, 1), Square(1, 1), Square(1, 2)}) == 2
        assert {Square(4, 4): "x"}[Square(4, 4)] == "x"

    def test_immutable(self):
        """Squares should be frozen."""
        square = Square(0, 0)
        with pytest.raises(AttributeError):
            square.row = 5

    def test_coordinate(self):
        """Should expose the (row, column) tuple."""
        assert Square(6, 1).coordinate == (6, 1)

    def test_ordering(self):
        """Should order by row, then column."""
        assert sorted([Square(1, 0), Square(0, 5), Square(0, 1)]) == [
            Square(0, 1),
            Square(0, 5),
            Square(1, 0),
        ]


class TestAlgebraicNotation:
    """Test chess-notation conversion."""

    def test_corners(self):
        """a1 and h8 should map to opposite corners."""
        assert Square.from_algebraic("a1") == Square(0, 0)
        assert Square.from_algebraic("h8") == Square(7, 7)

    def test_file_is_column(self):
        """The letter should select the column and the digit the row."""
        assert Square.from_algebraic("c2") == Square(1, 2)

    def test_case_and_whitespace(self):
        """Should accept upper case and surrounding spaces."""
        assert Square.from_algebraic(" B5 ") == Square(4, 1)

    def test_to_algebraic(self):
        """Should format back to notation."""
        assert Square(0, 0).to_algebraic() == "a1"
        assert Square(4, 1).to_algebraic() == "b5"

    @pytest.mark.parametrize("text", ["", "a", "11", "aa", "a0", "a-1"])
    def test_malformed_raises(self, text):
        """Should raise ValueError for malformed notation."""
        with pytest.raises(ValueError):
            Square.from_algebraic(text)


class TestParseSquare:
    """Test CLI coordinate parsing."""

    def test_row_column(self):
        """Should parse 'row,column'."""
        assert parse_square("3,4") == Square(3, 4)
        assert parse_square(" 0 , 7 ") == Square(0, 7)

    def test_algebraic(self):
        """Should fall back to algebraic notation."""
        assert parse_square("h8") == Square(7, 7)

    @pytest.mark.parametrize("text", ["1,2,3", "x,1", "1,", "zz"])
    def test_malformed_raises(self, text):
        """Should raise ValueError for unparseable input."""
        with pytest.raises(ValueError):
            parse_square(text)


class TestKnightMove:
    """Test the knight-move predicate."""

    def test_all_eight_offsets(self):
        """Every L-shaped displacement should count."""
        for d_row, d_col in [(1, 2), (2, 1), (-1, 2), (-2, 1),
                             (1, -2), (2, -1), (-1, -2), (-2, -1)]:
            assert is_knight_move((3, 3), (3 + d_row, 3 + d_col))

    def test_non_moves(self):
        """Straight, diagonal and zero displacements should not count."""
        assert not is_knight_move((3, 3), (3, 3))
        assert not is_knight_move((3, 3), (4, 4))
        assert not is_knight_move((3, 3), (3, 5))
        assert not is_knight_move((0, 0), (3, 3))

    def test_mixed_inputs(self):
        """Should accept Squares and tuples interchangeably."""
        assert is_knight_move(Square(0, 0), (1, 2))
        assert as_coordinate(Square(1, 2)) == as_coordinate((1, 2))

"""Tests for Coordinate and square constants."""

from chessrules.core.types import A1, A8, ALL_SQUARES, E2, H1, H8, Coordinate


class TestCoordinate:
    def test_equality_by_value(self) -> None:
        assert Coordinate(6, 4) == Coordinate(6, 4)
        assert Coordinate(6, 4) != Coordinate(4, 6)

    def test_validity_bounds(self) -> None:
        assert Coordinate(0, 0).is_valid
        assert Coordinate(7, 7).is_valid
        assert not Coordinate(-1, 0).is_valid
        assert not Coordinate(0, 8).is_valid
        assert not Coordinate(8, 3).is_valid

    def test_non_integer_fields_are_invalid(self) -> None:
        assert not Coordinate(6.0, 4.0).is_valid  # type: ignore[arg-type]
        assert not Coordinate(True, 0).is_valid
        assert not Coordinate("6", 4).is_valid  # type: ignore[arg-type]

    def test_row_major_ordering(self) -> None:
        assert Coordinate(0, 7) < Coordinate(1, 0)
        assert sorted([Coordinate(2, 1), Coordinate(1, 5), Coordinate(1, 2)]) == [
            Coordinate(1, 2),
            Coordinate(1, 5),
            Coordinate(2, 1),
        ]

    def test_offset(self) -> None:
        assert E2.offset(-2, 0) == Coordinate(4, 4)

    def test_str(self) -> None:
        assert str(E2) == "e2"
        assert str(Coordinate(9, 9)) == "(9,9)"


class TestSquareConstants:
    def test_corners(self) -> None:
        assert A8 == Coordinate(0, 0)
        assert H8 == Coordinate(0, 7)
        assert A1 == Coordinate(7, 0)
        assert H1 == Coordinate(7, 7)

    def test_e2(self) -> None:
        assert E2 == Coordinate(6, 4)

    def test_all_squares_row_major(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert list(ALL_SQUARES) == sorted(ALL_SQUARES)
        assert all(sq.is_valid for sq in ALL_SQUARES)

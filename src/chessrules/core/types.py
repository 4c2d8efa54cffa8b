"""Board coordinates.

Grid layout (row 0 is rank 8, Black's back rank)::

    a8=(0,0) b8=(0,1) ... h8=(0,7)
    ...
    a1=(7,0) b1=(7,1) ... h1=(7,7)
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True, order=True)
class Coordinate:
    """A (row, col) pair. May be out of range; check :attr:`is_valid`."""

    row: int
    col: int

    @property
    def is_valid(self) -> bool:
        """Integer row and column, both on the board."""
        if type(self.row) is not int or type(self.col) is not int:
            return False
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def offset(self, d_row: int, d_col: int) -> Coordinate:
        return Coordinate(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        if not self.is_valid:
            return f"({self.row},{self.col})"
        return chr(ord("a") + self.col) + str(BOARD_SIZE - self.row)


ALL_SQUARES: tuple[Coordinate, ...] = tuple(
    Coordinate(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[56:64]

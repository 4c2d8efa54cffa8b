"""Piece state owned by a board square."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Coordinate

# Symbol character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_SYMBOLS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(slots=True)
class PieceState:
    """A piece on the board together with its rule-relevant flags.

    ``just_advanced_two`` is only ever set on pawns and only for the ply
    right after their two-square advance.
    """

    kind: PieceType
    color: Color
    coordinate: Coordinate
    has_moved: bool = False
    just_advanced_two: bool = False

    @classmethod
    def from_char(cls, char: str, coordinate: Coordinate) -> PieceState:
        """Create a piece from its symbol, e.g. 'N' → white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color, coordinate)

    @property
    def symbol(self) -> str:
        """Uppercase for White, lowercase for Black."""
        return _SYMBOLS[(self.color, self.kind)]

    def __str__(self) -> str:
        return self.symbol

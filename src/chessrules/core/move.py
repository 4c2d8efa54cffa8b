"""Move value object recorded in the game history."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType, SpecialMove
from chessrules.core.piece import PieceState
from chessrules.core.types import Coordinate


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of one applied (or candidate) move.

    ``captured`` is a detached copy taken at capture time, so later board
    mutation never reaches into the history.
    """

    from_sq: Coordinate
    to_sq: Coordinate
    piece_kind: PieceType
    color: Color
    captured: PieceState | None = None
    special: SpecialMove = SpecialMove.NONE
    promotion: PieceType | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_castle(self) -> bool:
        return self.special in (SpecialMove.CASTLE_KINGSIDE, SpecialMove.CASTLE_QUEENSIDE)

    def __str__(self) -> str:
        return f"{self.from_sq} to {self.to_sq}"

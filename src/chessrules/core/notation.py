"""Algebraic square names ("e2") and move history text."""

from __future__ import annotations

from chessrules.core.enums import PieceType, SpecialMove
from chessrules.core.move import Move
from chessrules.core.types import BOARD_SIZE, Coordinate

_FILES = "abcdefgh"
_RANKS = "12345678"

_PROMOTION_SUFFIX: dict[PieceType, str] = {
    PieceType.QUEEN: "=Q",
    PieceType.ROOK: "=R",
    PieceType.BISHOP: "=B",
    PieceType.KNIGHT: "=N",
}


def parse_square(name: str) -> Coordinate:
    """Parse a square name, e.g. 'e2' → Coordinate(row=6, col=4)."""
    text = name.strip().lower()
    if len(text) != 2 or text[0] not in _FILES or text[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Coordinate(BOARD_SIZE - int(text[1]), _FILES.index(text[0]))


def square_name(sq: Coordinate) -> str:
    """Human-readable name, e.g. Coordinate(7, 0) → 'a1'."""
    if not sq.is_valid:
        raise ValueError(f"Coordinate off the board: {sq!r}")
    return _FILES[sq.col] + str(BOARD_SIZE - sq.row)


def format_move(move: Move) -> str:
    """History line for *move*, e.g. ``e1 to g1 O-O`` or ``e7 to e8 =Q``."""
    text = f"{square_name(move.from_sq)} to {square_name(move.to_sq)}"
    if move.special == SpecialMove.CASTLE_KINGSIDE:
        return f"{text} O-O"
    if move.special == SpecialMove.CASTLE_QUEENSIDE:
        return f"{text} O-O-O"
    if move.is_capture:
        text += " (x)"
    if move.special == SpecialMove.EN_PASSANT:
        text += " e.p."
    if move.promotion is not None:
        text += f" {_PROMOTION_SUFFIX[move.promotion]}"
    return text

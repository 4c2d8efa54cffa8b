"""Per-piece movement geometry.

Every predicate here is pure: it reads the board but never mutates it, and
it ignores whether the move would leave the mover's own king in check.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import PieceType
from chessrules.core.piece import PieceState
from chessrules.core.types import Coordinate

if TYPE_CHECKING:
    from chessrules.core.board import BoardState

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

_PROMOTION_CHARS: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
}

_Validator = Callable[[PieceState, Coordinate, Coordinate, "BoardState"], bool]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_clear(from_sq: Coordinate, to_sq: Coordinate, board: BoardState) -> bool:
    """Whether every square strictly between *from_sq* and *to_sq* is empty.

    Steps one square at a time along the sign of each delta, so it is only
    meaningful for straight or diagonal lines. The occupant's color is
    irrelevant: any piece blocks.
    """
    d_row = _sign(to_sq.row - from_sq.row)
    d_col = _sign(to_sq.col - from_sq.col)
    current = from_sq.offset(d_row, d_col)
    while current != to_sq:
        if board.piece_at(current) is not None:
            return False
        current = current.offset(d_row, d_col)
    return True


def promotion_kind(choice: object = None) -> PieceType:
    """Resolve a promotion choice; anything unrecognised becomes a Queen."""
    if isinstance(choice, PieceType):
        return choice if choice in PROMOTION_TYPES else PieceType.QUEEN
    if isinstance(choice, str):
        text = choice.strip().lower()
        if text in _PROMOTION_CHARS:
            return _PROMOTION_CHARS[text]
        for kind in PROMOTION_TYPES:
            if kind.name.lower() == text:
                return kind
    return PieceType.QUEEN


# -- Per-kind geometry -------------------------------------------------------


def _pawn(piece: PieceState, from_sq: Coordinate, to_sq: Coordinate, board: BoardState) -> bool:
    direction = piece.color.forward
    d_row = to_sq.row - from_sq.row
    d_col = to_sq.col - from_sq.col

    if d_col == 0:
        if d_row == direction:
            return board.piece_at(to_sq) is None
        if (
            d_row == 2 * direction
            and not piece.has_moved
            and from_sq.row == piece.color.pawn_row
        ):
            middle = from_sq.offset(direction, 0)
            return board.piece_at(middle) is None and board.piece_at(to_sq) is None
        return False

    if abs(d_col) == 1 and d_row == direction:
        target = board.piece_at(to_sq)
        if target is not None:
            return target.color != piece.color
        return is_en_passant_target(piece, from_sq, to_sq, board)

    return False


def _rook(piece: PieceState, from_sq: Coordinate, to_sq: Coordinate, board: BoardState) -> bool:
    if from_sq.row != to_sq.row and from_sq.col != to_sq.col:
        return False
    return is_path_clear(from_sq, to_sq, board)


def _bishop(piece: PieceState, from_sq: Coordinate, to_sq: Coordinate, board: BoardState) -> bool:
    if abs(to_sq.row - from_sq.row) != abs(to_sq.col - from_sq.col):
        return False
    return is_path_clear(from_sq, to_sq, board)


def _queen(piece: PieceState, from_sq: Coordinate, to_sq: Coordinate, board: BoardState) -> bool:
    straight = from_sq.row == to_sq.row or from_sq.col == to_sq.col
    diagonal = abs(to_sq.row - from_sq.row) == abs(to_sq.col - from_sq.col)
    if not (straight or diagonal):
        return False
    return is_path_clear(from_sq, to_sq, board)


def _knight(piece: PieceState, from_sq: Coordinate, to_sq: Coordinate, board: BoardState) -> bool:
    deltas = {abs(to_sq.row - from_sq.row), abs(to_sq.col - from_sq.col)}
    return deltas == {1, 2}


def _king(piece: PieceState, from_sq: Coordinate, to_sq: Coordinate, board: BoardState) -> bool:
    d_row = abs(to_sq.row - from_sq.row)
    d_col = abs(to_sq.col - from_sq.col)
    if d_row <= 1 and d_col <= 1:
        return True
    if d_row == 0 and d_col == 2:
        return is_castling_geometry(piece, from_sq, to_sq, board)
    return False


_VALIDATORS: dict[PieceType, _Validator] = {
    PieceType.PAWN: _pawn,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.ROOK: _rook,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}


# -- Special-move helpers ----------------------------------------------------


def is_en_passant_target(
    piece: PieceState, from_sq: Coordinate, to_sq: Coordinate, board: BoardState
) -> bool:
    """Empty diagonal target beside an enemy pawn that just advanced two."""
    if board.piece_at(to_sq) is not None:
        return False
    beside = board.piece_at(Coordinate(from_sq.row, to_sq.col))
    return (
        beside is not None
        and beside.kind == PieceType.PAWN
        and beside.color != piece.color
        and beside.just_advanced_two
    )


def castling_rook_square(from_sq: Coordinate, to_sq: Coordinate) -> Coordinate:
    """Corner rook for a two-column king move: col 7 kingside, col 0 queenside."""
    return Coordinate(from_sq.row, 7 if to_sq.col > from_sq.col else 0)


def is_castling_geometry(
    king: PieceState, from_sq: Coordinate, to_sq: Coordinate, board: BoardState
) -> bool:
    """Unmoved king, unmoved same-color rook, empty squares in between.

    King safety along the path is checked separately by the move generator.
    """
    if king.has_moved or from_sq.row != to_sq.row or abs(to_sq.col - from_sq.col) != 2:
        return False
    rook_sq = castling_rook_square(from_sq, to_sq)
    rook = board.piece_at(rook_sq)
    if (
        rook is None
        or rook.kind != PieceType.ROOK
        or rook.color != king.color
        or rook.has_moved
    ):
        return False
    return is_path_clear(from_sq, rook_sq, board)


def pawn_attacks(pawn: PieceState, from_sq: Coordinate, target: Coordinate) -> bool:
    """Capture geometry only: one row forward, one column aside."""
    return (
        target.row - from_sq.row == pawn.color.forward
        and abs(target.col - from_sq.col) == 1
    )


class PieceRules:
    """Static geometry checker dispatching on :class:`PieceType`."""

    @staticmethod
    def is_valid_move(
        piece: PieceState, from_sq: Coordinate, to_sq: Coordinate, board: BoardState
    ) -> bool:
        if not (from_sq.is_valid and to_sq.is_valid):
            return False
        return _VALIDATORS[piece.kind](piece, from_sq, to_sq, board)

    @staticmethod
    def attacks(piece: PieceState, target: Coordinate, board: BoardState) -> bool:
        """Whether *piece* threatens *target* (used for check detection).

        Pawns use their capture geometry and kings their adjacency; castling
        never counts as an attack.
        """
        from_sq = piece.coordinate
        if from_sq == target or not target.is_valid:
            return False
        if piece.kind == PieceType.PAWN:
            return pawn_attacks(piece, from_sq, target)
        if piece.kind == PieceType.KING:
            return abs(target.row - from_sq.row) <= 1 and abs(target.col - from_sq.col) <= 1
        return _VALIDATORS[piece.kind](piece, from_sq, target, board)
